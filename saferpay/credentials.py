from saferpay.data import (
    ACTION_SETTLEMENT, TESTACCOUNT_PREFIX, TESTACCOUNT_SPPASSWORD)
from saferpay.exceptions import ConfigurationError, MissingCredentialError

# Password policies for production accounts
ALWAYS = 'always'
NON_DEFAULT_ACTION = 'non_default_action'
POLICIES = (ALWAYS, NON_DEFAULT_ACTION)


def is_test_account(account_id, prefix=TESTACCOUNT_PREFIX):
    if not account_id:
        return False
    return account_id.startswith(prefix)


class CredentialResolver(object):
    """
    Picks the spPassword sent with a PayCompleteV2 request.

    Test accounts always use the published test password.  For production
    accounts the policy decides when a password must be supplied:

    * ``always`` - for every action
    * ``non_default_action`` - for everything except a settlement
    """

    def __init__(self, policy=ALWAYS, test_prefix=TESTACCOUNT_PREFIX,
                 test_password=TESTACCOUNT_SPPASSWORD):
        if policy not in POLICIES:
            raise ConfigurationError(
                "Unknown password policy '%s' (choose from %s)" % (
                    policy, ', '.join(POLICIES)))
        self.policy = policy
        self.test_prefix = test_prefix
        self.test_password = test_password

    def is_test_account(self, account_id):
        return is_test_account(account_id, self.test_prefix)

    def is_password_required(self, action):
        if self.policy == ALWAYS:
            return True
        return action != ACTION_SETTLEMENT

    def resolve(self, account_id, password=None, action=ACTION_SETTLEMENT):
        if self.is_test_account(account_id):
            return self.test_password
        if not password and self.is_password_required(action):
            raise MissingCredentialError(account_id)
        return password or None
