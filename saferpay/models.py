import re
from urllib.parse import parse_qsl
from xml.dom.minidom import parseString
from xml.parsers.expat import ExpatError

from django.db import models


def prettify_payload(payload):
    """
    Lay out a urlencoded request one field per line, or pretty-print an
    XML response
    """
    if not payload:
        return ''
    if '<' in payload:
        prefix, xml_str = payload[:payload.index('<')], payload[payload.index('<'):]
        try:
            pretty = parseString(xml_str).documentElement.toprettyxml(indent='    ')
        except ExpatError:
            return payload
        return prefix + pretty
    return '\n'.join('%s=%s' % pair for pair in parse_qsl(payload, keep_blank_values=True))


class OrderTransaction(models.Model):

    # Note we don't use a foreign key as the order hasn't been created
    # by the time the transaction takes place
    order_number = models.CharField(max_length=128, db_index=True, blank=True)

    # The protocol step - one of 'init', 'confirm' or 'complete'
    method = models.CharField(max_length=12)
    saferpay_id = models.CharField(max_length=128, blank=True, null=True,
                                   db_index=True)
    account_id = models.CharField(max_length=64, blank=True)

    # Amount in minor units, as sent to Saferpay
    amount = models.CharField(max_length=32, blank=True, null=True)
    currency = models.CharField(max_length=12, blank=True)
    action = models.CharField(max_length=32, blank=True)
    result = models.CharField(max_length=32, blank=True, null=True)

    # Store full payloads for debugging purposes
    request_data = models.TextField(blank=True)
    response_data = models.TextField(blank=True)

    date_created = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ('-date_created', '-id')

    def save(self, *args, **kwargs):
        # Ensure the password isn't saved
        if not self.pk:
            self.request_data = re.sub(r'(spPassword=)[^&]*', r'\1XXX',
                                       self.request_data or '')
        super(OrderTransaction, self).save(*args, **kwargs)

    def __str__(self):
        return u'%s txn for order %s - ID: %s, result: %s' % (
            self.method.upper(),
            self.order_number,
            self.saferpay_id,
            self.result)

    @property
    def pretty_request_data(self):
        return prettify_payload(self.request_data)

    @property
    def pretty_response_data(self):
        return prettify_payload(self.response_data)

    @property
    def accepted(self):
        return self.result == '0'
