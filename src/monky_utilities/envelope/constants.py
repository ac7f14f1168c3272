"""Wire constants shared by every producer and consumer.

Envelope layout::

    envelope   ::= magic_byte json_utf8
    magic_byte ::= 1 octet (MAGIC_BYTE)
    json_utf8  ::= UTF-8 encoded JSON value, no length prefix, no trailer
"""

# Fixed framing marker at offset 0.  Changing it breaks every consumer.
MAGIC_BYTE: int = 0x00

HEADER_SIZE: int = 1
