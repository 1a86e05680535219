from decimal import Decimal as D
import logging

from django.conf import settings
from oscar.apps.payment.exceptions import UnableToTakePayment

from saferpay import credentials, data, gateway, signals, xmlutils
from saferpay.models import OrderTransaction
from saferpay.transport import HttpTransport

logger = logging.getLogger('saferpay')

INIT, CONFIRM, COMPLETE = 'init', 'confirm', 'complete'


def to_minor_units(amount):
    """
    Saferpay expects amounts in the smallest currency unit, eg 12.34 CHF is
    sent as 1234
    """
    return str(int((D(amount) * 100).quantize(D('1'))))


class Facade(object):
    """
    A bridge between oscar's objects and the core gateway object
    """

    def __init__(self):
        self.account_id = getattr(settings, 'SAFERPAY_ACCOUNT_ID',
                                  data.TESTACCOUNT_ACCOUNTID)
        self.password = getattr(settings, 'SAFERPAY_PASSWORD', None)
        self.currency = getattr(settings, 'SAFERPAY_CURRENCY', 'CHF')
        self.langid = getattr(settings, 'SAFERPAY_LANGID', None)
        self.gateway = gateway.Gateway(
            transport=HttpTransport(getattr(settings, 'SAFERPAY_TIMEOUT', 30)),
            logger=logging.getLogger('saferpay.gateway'),
            resolver=credentials.CredentialResolver(
                getattr(settings, 'SAFERPAY_PASSWORD_POLICY',
                        credentials.ALWAYS)))

    def record_txn(self, method, order_number, record, request_data,
                   response_data, action='', result=None):
        return OrderTransaction.objects.create(
            order_number=order_number or '',
            method=method,
            saferpay_id=record.id,
            account_id=record.accountid or '',
            amount=record.amount,
            currency=record.get('CURRENCY', ''),
            action=action,
            result=result,
            request_data=request_data,
            response_data=response_data)

    def get_friendly_error_message(self, response):
        default_msg = 'An error occurred when communicating with the payment gateway.'
        if response.message:
            return '%s (%s)' % (default_msg, response.message)
        return default_msg

    # ===
    # API
    # ===

    def initiate(self, order_number, amount, success_link, fail_link,
                 back_link=None, notify_url=None, description=None,
                 currency=None):
        """
        Create a payment and return the URL the customer should be
        redirected to.
        """
        if amount == 0:
            raise UnableToTakePayment("Order amount must be non-zero")
        if currency is None:
            currency = self.currency
        parameter = data.PayInitParameter(
            ACCOUNTID=self.account_id,
            AMOUNT=to_minor_units(amount),
            CURRENCY=currency,
            ORDERID=order_number,
            DESCRIPTION=description or 'Order %s' % order_number,
            SUCCESSLINK=success_link,
            FAILLINK=fail_link,
            BACKLINK=back_link,
            NOTIFYURL=notify_url,
            LANGID=self.langid)
        content = self.gateway.pay_init(parameter)
        self.record_txn(INIT, order_number, parameter,
                        xmlutils.encode(parameter), content)
        return content.strip()

    def confirm(self, data_xml, signature):
        """
        Verify a confirmation posted back by Saferpay
        """
        confirm = self.gateway.verify_pay_confirm(data_xml, signature)
        self.record_txn(CONFIRM, confirm.orderid, confirm,
                        xmlutils.encode({'DATA': data_xml,
                                         'SIGNATURE': signature}),
                        data_xml)
        signals.confirmation_received.send_robust(
            sender=self.__class__, confirm=confirm)
        return confirm

    def complete(self, confirm, action=data.ACTION_SETTLEMENT):
        """
        Settle (or cancel) a confirmed payment and return the Saferpay
        transaction ID
        """
        response = self.gateway.pay_complete(confirm, action, self.password)
        parameter = data.PayCompleteParameter.from_confirm(confirm, action)
        self.record_txn(COMPLETE, confirm.orderid, parameter,
                        xmlutils.encode(parameter), xmlutils.encode(response),
                        action=action, result=response.result)
        signals.payment_completed.send_robust(
            sender=self.__class__, response=response)

        if response.is_successful():
            return confirm.id
        logger.error("Saferpay completion of %s failed: %s",
                     confirm.id, response.message)
        raise UnableToTakePayment(self.get_friendly_error_message(response))

    def cancel(self, confirm):
        return self.complete(confirm, data.ACTION_CANCEL)
