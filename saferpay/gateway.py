import logging
import re

from saferpay.credentials import CredentialResolver
from saferpay.data import (
    ACTION_SETTLEMENT, PayCompleteParameter, PayCompleteResponse,
    PayConfirmParameter)
from saferpay.exceptions import (
    ConfigurationError, GatewayError, MalformedResponseError,
    MissingCredentialError, PreconditionError, TransportError)
from saferpay import xmlutils

# PayCompleteV2 responses are prefixed with "OK:"
ENVELOPE_LENGTH = 3

CONTENT_TYPE = 'application/x-www-form-urlencoded'


def mask_password(payload):
    return re.sub(r'(spPassword=)[^&]*', r'\1XXX', payload)


class Gateway(object):
    """
    Drives the Saferpay PayInit -> PayConfirm -> PayCompleteV2 sequence.

    The gateway holds no transaction state; the records passed in and out of
    each call carry everything needed for the next step.
    """

    def __init__(self, transport=None, logger=None, resolver=None):
        self.transport = transport
        self.logger = logger or logging.getLogger('saferpay.gateway')
        self.resolver = resolver or CredentialResolver()

    # ===
    # API
    # ===

    def pay_init(self, parameter):
        """
        Create a payment.  The raw response (normally the URL the customer
        should be redirected to) is returned untouched.
        """
        return self.request(parameter.url, parameter.data)

    def verify_pay_confirm(self, data, signature, confirm=None):
        """
        Decode the confirmation Saferpay posted back and have Saferpay verify
        its signature.
        """
        if confirm is None:
            confirm = PayConfirmParameter()
        self._fill_from_xml(confirm, data)
        self.request(confirm.url, {'DATA': data, 'SIGNATURE': signature})
        return confirm

    def pay_complete(self, confirm, action=ACTION_SETTLEMENT, password=None,
                     response=None):
        """
        Settle, cancel or close a confirmed transaction
        """
        if confirm.id is None:
            self.logger.critical('Saferpay: call confirm before complete!')
            raise PreconditionError('Saferpay: call confirm before complete!')

        parameter = PayCompleteParameter.from_confirm(confirm, action)
        payload = parameter.data
        try:
            sp_password = self.resolver.resolve(
                parameter.accountid, password, action)
        except MissingCredentialError:
            self.logger.critical(
                'Saferpay: no password given for account %s!',
                parameter.accountid)
            raise
        if sp_password is not None:
            payload['spPassword'] = sp_password

        content = self.request(parameter.url, payload)

        if response is None:
            response = PayCompleteResponse()
        self._fill_from_xml(response, content[ENVELOPE_LENGTH:])
        return response

    # =======
    # Helpers
    # =======

    def request(self, url, fields):
        if self.transport is None:
            self.logger.critical('Saferpay: no transport configured!')
            raise ConfigurationError(
                'Saferpay: please configure a transport for the gateway')
        body = xmlutils.encode(fields)

        self.logger.debug(url)
        self.logger.debug(mask_password(body))

        status, content = self.transport.send(
            'POST', url, {'Content-Type': CONTENT_TYPE}, body)

        self.logger.debug(content)

        if status != 200:
            self.logger.critical(
                'Saferpay: request failed with status code: %s!', status,
                extra={'status_code': status})
            raise TransportError(status, content)
        if 'ERROR' in content:
            self.logger.critical(
                'Saferpay: request failed: %s!', content,
                extra={'content': content})
            raise GatewayError(content)
        return content

    def _fill_from_xml(self, record, xml_str):
        try:
            fields = xmlutils.decode(xml_str)
        except MalformedResponseError:
            self.logger.critical('Saferpay: invalid xml received from saferpay')
            raise
        record.update(fields)
