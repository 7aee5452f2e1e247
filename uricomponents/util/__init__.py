"""General utilities.

This package includes the modules that implement the percent-encoding
engine and the numeric host helpers shared by every component.

The modules must be imported explicitly::

    from uricomponents.util import ipv4
    from uricomponents.util import uri

    decoded = uri.decode('/caf%C3%A9')
    host = ipv4.parse('0x7f.1')
"""
