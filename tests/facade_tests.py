from decimal import Decimal as D

from mock import Mock

from django.test import TestCase, override_settings
from oscar.apps.payment.exceptions import UnableToTakePayment

from saferpay import signals
from saferpay.exceptions import GatewayError, MissingCredentialError
from saferpay.facade import Facade, to_minor_units
from saferpay.models import OrderTransaction

from . import PayloadTestingMixin, fixtures


def mock_transport(*responses):
    transport = Mock()
    transport.send.side_effect = [(200, r) for r in responses]
    return transport


class FacadeTests(TestCase, PayloadTestingMixin):

    def setUp(self):
        self.facade = Facade()

    def sent_body(self, call=-1):
        return self.facade.gateway.transport.send.call_args_list[call][0][3]

    def initiate(self, amount=D('12.95'), **kwargs):
        return self.facade.initiate(
            '100001', amount,
            success_link='https://shop.example.com/checkout/success/',
            fail_link='https://shop.example.com/checkout/fail/',
            **kwargs)

    def test_initiate_returns_redirect_url(self):
        self.facade.gateway.transport = mock_transport(
            fixtures.PAY_INIT_RESPONSE + '\r\n')
        self.assertEqual(fixtures.PAY_INIT_RESPONSE, self.initiate())

    def test_initiate_sends_amount_in_minor_units(self):
        self.facade.gateway.transport = mock_transport(fixtures.PAY_INIT_RESPONSE)
        self.initiate()
        body = self.sent_body()
        self.assertPayloadFieldEquals(body, '1295', 'AMOUNT')
        self.assertPayloadFieldEquals(body, 'CHF', 'CURRENCY')
        self.assertPayloadFieldEquals(body, fixtures.TEST_ACCOUNT_ID, 'ACCOUNTID')
        self.assertPayloadFieldEquals(body, '100001', 'ORDERID')
        self.assertPayloadFieldEquals(body, 'Order 100001', 'DESCRIPTION')
        self.assertPayloadHasNoField(body, 'NOTIFYURL')

    def test_initiate_with_explicit_currency(self):
        self.facade.gateway.transport = mock_transport(fixtures.PAY_INIT_RESPONSE)
        self.initiate(currency='EUR',
                      notify_url='https://shop.example.com/saferpay/confirm/')
        self.assertPayloadFieldEquals(self.sent_body(), 'EUR', 'CURRENCY')
        self.assertPayloadFieldEquals(
            self.sent_body(), 'https://shop.example.com/saferpay/confirm/',
            'NOTIFYURL')

    def test_initiate_creates_txn_model(self):
        self.facade.gateway.transport = mock_transport(fixtures.PAY_INIT_RESPONSE)
        self.initiate()
        txn = OrderTransaction.objects.get(order_number='100001')
        self.assertEqual('init', txn.method)
        self.assertEqual('1295', txn.amount)
        self.assertEqual('CHF', txn.currency)
        self.assertEqual(fixtures.PAY_INIT_RESPONSE, txn.response_data)

    def test_zero_amount_raises_exception(self):
        with self.assertRaises(UnableToTakePayment):
            self.initiate(amount=D('0.00'))

    def test_gateway_error_is_not_recorded(self):
        self.facade.gateway.transport = mock_transport(fixtures.ERROR_RESPONSE)
        with self.assertRaises(GatewayError):
            self.initiate()
        self.assertEqual(0, OrderTransaction.objects.count())

    def test_confirm_records_and_signals(self):
        self.facade.gateway.transport = mock_transport(fixtures.VERIFY_RESPONSE)
        receiver = Mock()
        signals.confirmation_received.connect(receiver)
        try:
            confirm = self.facade.confirm(fixtures.PAY_CONFIRM, 'signature')
        finally:
            signals.confirmation_received.disconnect(receiver)

        self.assertEqual('A668MSAprOj4tAzv7G9lAQUfUr3A', confirm.id)
        self.assertIs(confirm, receiver.call_args[1]['confirm'])
        txn = OrderTransaction.objects.get(method='confirm')
        self.assertEqual('100001', txn.order_number)
        self.assertEqual(confirm.id, txn.saferpay_id)
        self.assertEqual(fixtures.PAY_CONFIRM, txn.response_data)

    def test_complete_returns_saferpay_id(self):
        self.facade.gateway.transport = mock_transport(
            fixtures.VERIFY_RESPONSE, fixtures.PAY_COMPLETE_RESPONSE)
        confirm = self.facade.confirm(fixtures.PAY_CONFIRM, 'signature')
        self.assertEqual(confirm.id, self.facade.complete(confirm))
        txn = OrderTransaction.objects.get(method='complete')
        self.assertEqual('0', txn.result)
        self.assertEqual('Settlement', txn.action)
        self.assertTrue(txn.accepted)
        self.assertPayloadHasNoField(txn.request_data, 'spPassword')

    def test_failed_completion_raises_unable_to_take_payment(self):
        self.facade.gateway.transport = mock_transport(
            fixtures.VERIFY_RESPONSE, fixtures.PAY_COMPLETE_FAILED_RESPONSE)
        confirm = self.facade.confirm(fixtures.PAY_CONFIRM, 'signature')
        with self.assertRaises(UnableToTakePayment):
            self.facade.complete(confirm)
        txn = OrderTransaction.objects.get(method='complete')
        self.assertEqual('75', txn.result)

    def test_cancel_sends_cancel_action(self):
        self.facade.gateway.transport = mock_transport(
            fixtures.VERIFY_RESPONSE, fixtures.PAY_COMPLETE_RESPONSE)
        confirm = self.facade.confirm(fixtures.PAY_CONFIRM, 'signature')
        self.facade.cancel(confirm)
        self.assertPayloadFieldEquals(self.sent_body(), 'Cancel', 'ACTION')

    @override_settings(SAFERPAY_ACCOUNT_ID=fixtures.PRODUCTION_ACCOUNT_ID,
                       SAFERPAY_PASSWORD='secret')
    def test_production_password_is_sent(self):
        facade = Facade()
        facade.gateway.transport = mock_transport(
            fixtures.VERIFY_RESPONSE, fixtures.PAY_COMPLETE_RESPONSE)
        confirm = facade.confirm(fixtures.PRODUCTION_CONFIRM, 'signature')
        facade.complete(confirm)
        body = facade.gateway.transport.send.call_args[0][3]
        self.assertPayloadFieldEquals(body, 'secret', 'spPassword')

    def test_production_account_without_password_raises(self):
        self.facade.gateway.transport = mock_transport(fixtures.VERIFY_RESPONSE)
        confirm = self.facade.confirm(fixtures.PRODUCTION_CONFIRM, 'signature')
        with self.assertRaises(MissingCredentialError):
            self.facade.complete(confirm)

    @override_settings(SAFERPAY_PASSWORD_POLICY='non_default_action')
    def test_password_policy_is_read_from_settings(self):
        facade = Facade()
        facade.gateway.transport = mock_transport(
            fixtures.VERIFY_RESPONSE, fixtures.PAY_COMPLETE_RESPONSE)
        confirm = facade.confirm(fixtures.PRODUCTION_CONFIRM, 'signature')
        self.assertEqual(confirm.id, facade.complete(confirm))


class MinorUnitsTests(TestCase):

    def test_decimal_amounts(self):
        self.assertEqual('1295', to_minor_units(D('12.95')))
        self.assertEqual('100', to_minor_units(D('1')))
        self.assertEqual('5', to_minor_units('0.05'))
