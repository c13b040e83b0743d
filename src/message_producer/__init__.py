"""Another Message Producer.

The whole domain is one operation::

    >>> import message_producer
    >>> message_producer.produce()
    'Hello World from Another Message Producer'
    >>> message_producer.produce() == message_producer.MESSAGE
    True

The ``message-producer`` command wraps it with layered configuration and
structured logging; see :mod:`message_producer.adapters.cli`.
"""

from __future__ import annotations

from .__init__conf__ import print_info
from .domain import MESSAGE, OutputFormat, produce

__all__ = ["MESSAGE", "OutputFormat", "print_info", "produce"]
