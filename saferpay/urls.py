from django.urls import path
from django.views.decorators.csrf import csrf_exempt

from saferpay import views


# Saferpay posts confirmations to the NOTIFYURL
urlpatterns = [
    path('confirm/', csrf_exempt(views.ConfirmationCallbackView.as_view()),
         name='saferpay-confirm-callback'),
]
