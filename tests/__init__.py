from urllib.parse import parse_qs


class PayloadTestingMixin(object):

    def assertPayloadFieldEquals(self, payload, value, field):
        data = parse_qs(payload, keep_blank_values=True)
        if field not in data:
            self.fail("No field '%s' found in payload '%s'" % (field, payload))
        self.assertEqual(value, data[field][0])

    def assertPayloadHasNoField(self, payload, field):
        data = parse_qs(payload, keep_blank_values=True)
        self.assertNotIn(field, data)
