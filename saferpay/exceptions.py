from django.core.exceptions import ImproperlyConfigured
from oscar.apps.payment import exceptions as oscar_exceptions

# Error kinds
CONFIGURATION = 'configuration'
TRANSPORT = 'transport'
GATEWAY = 'gateway'
MALFORMED_RESPONSE = 'malformed_response'
PRECONDITION = 'precondition'
MISSING_CREDENTIAL = 'missing_credential'


class SaferpayError(oscar_exceptions.PaymentError):
    """
    Base class for every failure raised by the Saferpay client.

    ``kind`` identifies the failure so callers can decide on a recovery
    strategy without inspecting the class hierarchy.
    """
    kind = None
    retryable = False


class ConfigurationError(SaferpayError, ImproperlyConfigured):
    """
    A required collaborator (eg the transport) is missing or invalid
    """
    kind = CONFIGURATION


class TransportError(SaferpayError, oscar_exceptions.GatewayError):
    """
    The gateway answered with a non-200 status code
    """
    kind = TRANSPORT
    retryable = True

    def __init__(self, status_code, content=None):
        self.status_code = status_code
        self.content = content
        super(TransportError, self).__init__(
            "Saferpay: request failed with status code: %s" % status_code)


class GatewayError(SaferpayError, oscar_exceptions.GatewayError):
    """
    The gateway answered with a 200 but the body signals an error
    """
    kind = GATEWAY

    def __init__(self, content):
        self.content = content
        super(GatewayError, self).__init__(
            "Saferpay: request failed: %s" % content)


class MalformedResponseError(SaferpayError, oscar_exceptions.GatewayError):
    kind = MALFORMED_RESPONSE

    def __init__(self, content, reason=None):
        self.content = content
        self.reason = reason
        msg = "Saferpay: invalid xml received from saferpay"
        if reason:
            msg = "%s (%s)" % (msg, reason)
        super(MalformedResponseError, self).__init__(msg)


class PreconditionError(SaferpayError):
    kind = PRECONDITION


class MissingCredentialError(SaferpayError,
                             oscar_exceptions.InvalidGatewayRequestError):
    """
    A production account needs an spPassword and none was given
    """
    kind = MISSING_CREDENTIAL

    def __init__(self, account_id):
        self.account_id = account_id
        super(MissingCredentialError, self).__init__(
            "Saferpay: no password given for account %s" % account_id)
