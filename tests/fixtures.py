TEST_ACCOUNT_ID = '99867-94913159'
PRODUCTION_ACCOUNT_ID = '401860-17795278'

PAY_INIT_RESPONSE = (
    'https://www.saferpay.com/vt2/Pay.aspx?DATA=%3cIDP+MSGTYPE%3d%22'
    'PayInit%22+TOKEN%3d%22(unused)%22%2f%3e&SIGNATURE=7b2bb5ea')

SAMPLE_CONFIRM = (
    '<CONFIRM ID="1" AMOUNT="100" ACCOUNTID="99867-94913159"/>')

PAY_CONFIRM = (
    '<IDP MSGTYPE="PayConfirm" TOKEN="(unused)" VTVERIFY="(obsolete)" '
    'KEYID="1-0" ID="A668MSAprOj4tAzv7G9lAQUfUr3A" '
    'ACCOUNTID="99867-94913159" AMOUNT="1295" CURRENCY="CHF" '
    'CARDREFID="" PROVIDERID="90" PROVIDERNAME="Saferpay Test Card" '
    'ORDERID="100001" IP="193.247.180.193" IPCOUNTRY="CH" '
    'CCCOUNTRY="XX" MPI_LIABILITYSHIFT="yes" ECI="1" '
    'XID="CxMTYwhoUXtCBAEndBULcRIQaAY=" '
    'CAVV="AAABBIIFmAAAAAAAAAAAAAAAAAA="/>')

PRODUCTION_CONFIRM = (
    '<IDP MSGTYPE="PayConfirm" ID="WxWrIlA48W06rAjKKOp5bzS80E5A" '
    'ACCOUNTID="401860-17795278" AMOUNT="1295" CURRENCY="CHF" '
    'ORDERID="100002"/>')

VERIFY_RESPONSE = 'OK:ID=A668MSAprOj4tAzv7G9lAQUfUr3A&TOKEN=(unused)'

PAY_COMPLETE_RESPONSE = (
    'OK:<IDP RESULT="0" MSG="request was processed successfully"/>')

PAY_COMPLETE_FAILED_RESPONSE = (
    'OK:<IDP RESULT="75" MSG="transaction could not be completed" '
    'AUTHMESSAGE="amount exceeds authorization"/>')

ERROR_RESPONSE = 'ERROR: invalid signature'
