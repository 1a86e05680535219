import logging

SAFERPAY = 'Saferpay'

logging.getLogger('saferpay').addHandler(logging.NullHandler())
