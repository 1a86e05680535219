import http.client
from urllib.parse import urlsplit

from saferpay.exceptions import ConfigurationError


class HttpTransport(object):
    """
    Minimal HTTP(S) transport.  A new connection is opened for each request
    so one instance can be shared between threads.
    """

    def __init__(self, timeout=30):
        self.timeout = timeout

    def _get_connection(self, url):
        parts = urlsplit(url)
        if parts.scheme == 'https':
            conn_class = http.client.HTTPSConnection
        elif parts.scheme == 'http':
            conn_class = http.client.HTTPConnection
        else:
            raise ConfigurationError(
                "Saferpay URL must start with http:// or https:// (got %s)" % url)
        path = parts.path or '/'
        if parts.query:
            path = '%s?%s' % (path, parts.query)
        return conn_class(parts.netloc, timeout=self.timeout), path

    def send(self, method, url, headers, body):
        conn, path = self._get_connection(url)
        try:
            conn.request(method, path, body, headers)
            response = conn.getresponse()
            content = response.read()
            status = response.status
        finally:
            conn.close()
        try:
            text = content.decode('utf-8')
        except UnicodeDecodeError:
            text = content.decode('latin-1')
        return status, text
