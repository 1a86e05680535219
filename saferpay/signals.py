from django.dispatch import Signal

# Sent with the decoded PayConfirmParameter as ``confirm``
confirmation_received = Signal()

# Sent with the PayCompleteResponse as ``response``
payment_completed = Signal()
