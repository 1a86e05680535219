import logging

from django.views import generic
from django import http

from saferpay.exceptions import SaferpayError
from saferpay.facade import Facade

logger = logging.getLogger('saferpay.views')


class ConfirmationCallbackView(generic.View):
    """
    Saferpay will POST the payment confirmation to this view (the NOTIFYURL
    of the PayInit request).  The confirmation is verified with Saferpay and
    recorded; other processes should listen to the confirmation_received
    signal to complete the payment.
    """

    def post(self, request, *args, **kwargs):
        try:
            data = request.POST['DATA']
            signature = request.POST['SIGNATURE']
        except KeyError:
            logger.error("Confirmation received without DATA or SIGNATURE")
            return http.HttpResponseBadRequest("error")
        try:
            confirm = Facade().confirm(data, signature)
        except SaferpayError as e:
            logger.warning("Saferpay confirmation rejected: %s", e)
            return http.HttpResponseServerError("error")
        logger.info("Confirmation received for Saferpay ID %s", confirm.id)
        return http.HttpResponse("ok")
