"""
Records exchanged with the Saferpay HTTPS interface.

Each record is a flat set of named string fields plus the URL of the
endpoint it is posted to.  The field tuples list the names documented by
Saferpay; the gateway may return others, which are stored as well.
"""

# Actions for PayCompleteV2
ACTION_SETTLEMENT = 'Settlement'
ACTION_CANCEL = 'Cancel'
ACTION_CLOSE_BATCH = 'CloseBatch'
ACTIONS = (ACTION_SETTLEMENT, ACTION_CANCEL, ACTION_CLOSE_BATCH)

# Saferpay test account
TESTACCOUNT_PREFIX = '99867-'
TESTACCOUNT_ACCOUNTID = '99867-94913159'
TESTACCOUNT_SPPASSWORD = 'XAjc3Kna'

BASE_URL = 'https://www.saferpay.com/hosting'


class Record(object):
    url = None
    FIELDS = ()

    def __init__(self, **fields):
        self._data = {}
        self.update(fields)

    def set(self, name, value):
        if value is None:
            self._data.pop(name, None)
        else:
            self._data[name] = str(value)
        return self

    def get(self, name, default=None):
        return self._data.get(name, default)

    def update(self, fields):
        for name, value in fields.items():
            self.set(name, value)
        return self

    @property
    def data(self):
        return dict(self._data)

    def __getitem__(self, name):
        return self._data[name]

    def __contains__(self, name):
        return name in self._data

    def __eq__(self, other):
        return type(self) is type(other) and self._data == other._data

    def __ne__(self, other):
        return not self == other

    def __repr__(self):
        return '<%s %r>' % (self.__class__.__name__, self._data)

    @property
    def id(self):
        return self.get('ID')

    @property
    def amount(self):
        return self.get('AMOUNT')

    @property
    def accountid(self):
        return self.get('ACCOUNTID')


class PayInitParameter(Record):
    url = BASE_URL + '/CreatePayInit.asp'
    FIELDS = (
        'ACCOUNTID', 'AMOUNT', 'CURRENCY', 'DESCRIPTION', 'ORDERID',
        'VTCONFIG', 'SUCCESSLINK', 'FAILLINK', 'BACKLINK', 'NOTIFYURL',
        'AUTOCLOSE', 'CCNAME', 'NOTIFYADDRESS', 'USERNOTIFY', 'LANGID',
        'SHOWLANGUAGES', 'PAYMENTMETHODS', 'DURATION', 'CARDREFID',
        'DELIVERY', 'APPEARANCE', 'ADDRESS', 'COMPANY', 'GENDER',
        'FIRSTNAME', 'LASTNAME', 'STREET', 'ZIP', 'CITY', 'COUNTRY',
        'EMAIL', 'PHONE')


class PayConfirmParameter(Record):
    url = BASE_URL + '/VerifyPayConfirm.asp'
    FIELDS = (
        'MSGTYPE', 'VTVERIFY', 'KEYID', 'ID', 'TOKEN', 'ACCOUNTID',
        'AMOUNT', 'CURRENCY', 'CARDREFID', 'SCDRESULT', 'PROVIDERID',
        'PROVIDERNAME', 'ORDERID', 'IP', 'IPCOUNTRY', 'CCCOUNTRY',
        'MPI_LIABILITYSHIFT', 'ECI', 'XID', 'CAVV')

    @property
    def orderid(self):
        return self.get('ORDERID')


class PayCompleteParameter(Record):
    url = BASE_URL + '/PayCompleteV2.asp'
    FIELDS = ('ID', 'AMOUNT', 'ACCOUNTID', 'ACTION')

    @classmethod
    def from_confirm(cls, confirm, action=ACTION_SETTLEMENT):
        """
        Build the completion request for a confirmed transaction.  Only the
        identity and amount fields are carried over.
        """
        return cls(ID=confirm.id,
                   AMOUNT=confirm.amount,
                   ACCOUNTID=confirm.accountid,
                   ACTION=action)

    @property
    def action(self):
        return self.get('ACTION')


class PayCompleteResponse(Record):
    FIELDS = ('RESULT', 'MSG', 'MESSAGE', 'AUTHMESSAGE', 'ID')

    # Result codes
    SUCCESS = '0'

    @property
    def result(self):
        return self.get('RESULT')

    @property
    def message(self):
        return self.get('MESSAGE') or self.get('MSG') or self.get('AUTHMESSAGE')

    def is_successful(self):
        return self.result == self.SUCCESS
