## message.py
# IRC message parsing and construction.
import logging

from . import protocol
from .prefix import Prefix
from .tags import Tags

__all__ = [ 'Message', 'parse_message' ]

logger = logging.getLogger(__name__)


class Message(protocol.Message):
    """
    A single IRC message: tags, source prefix, command and parameters.
    `prefix` is None when the message carries no source.
    """
    def __init__(self, command, params=None, prefix=None, tags=None, _trailing=False):
        self.command = command
        self.params = list(params) if params else []
        self.prefix = prefix
        self.tags = Tags(tags or {})
        # Whether the last parameter was received in trailing form.
        self._trailing = _trailing

    @classmethod
    def parse(cls, line, encoding=protocol.DEFAULT_ENCODING):
        """
        Parse given line into IRC message structure.
        Accepts str, or bytes to be decoded using the given encoding.
        Returns a Message.
        """
        # Decode message.
        if isinstance(line, (bytes, bytearray)):
            try:
                message = line.decode(encoding)
            except UnicodeDecodeError:
                # Try our fallback encoding.
                message = line.decode(protocol.FALLBACK_ENCODING)
        else:
            message = line

        # Strip message separator.
        received = message
        message = message.rstrip(protocol.LINE_TERMINATORS)
        if not message:
            raise protocol.EmptyMessage(received)
        raw = message

        # Extract message sections.
        # Format: (@tags )? (:source )? command parameter*
        tags = Tags()
        if message.startswith(protocol.TAG_INDICATOR):
            raw_tags, sep, message = message.partition(' ')
            if not sep:
                raise protocol.NoDataAfterTags(raw)
            tags = Tags.parse(raw_tags[len(protocol.TAG_INDICATOR):])

        prefix = None
        if message.startswith(protocol.SOURCE_INDICATOR):
            raw_prefix, sep, message = message.partition(' ')
            if not sep:
                raise protocol.NothingAfterPrefix(raw)
            prefix = Prefix.parse(raw_prefix[len(protocol.SOURCE_INDICATOR):])

        # Extract parameters properly.
        # Format: word* (:sentence)?
        message, has_trailing, trailing = message.partition(protocol.TRAILING_SEPARATOR)
        params = [ param for param in protocol.ARGUMENT_SEPARATOR.split(message) if param ]
        if not params:
            raise protocol.NoCommand(raw)
        if has_trailing:
            params.append(trailing)

        command = params.pop(0).upper()
        logger.debug('Parsed message: [%s] %s %s', prefix, command, params)
        return cls(command, params, prefix=prefix, tags=tags, _trailing=bool(has_trailing))

    def construct(self):
        """ Construct a raw IRC line, without line terminator. """
        message = self.command

        # Add parameters.
        if self.params:
            *middle, trailing = self.params
            for param in middle:
                message += ' ' + param

            # Trailing parameter?
            if self._trailing or not trailing or ' ' in trailing or trailing.startswith(protocol.TRAILING_PREFIX):
                message += protocol.TRAILING_SEPARATOR + trailing
            else:
                message += ' ' + trailing

        # Prepend source. Unlike a name-only check, a source with just user or host is kept.
        if self.prefix:
            message = protocol.SOURCE_INDICATOR + self.prefix.construct() + ' ' + message

        # Prepend tags.
        if self.tags:
            message = protocol.TAG_INDICATOR + self.tags.construct() + ' ' + message

        return message

    def trailing(self):
        """ Return the last parameter, or '' if there are none. """
        if not self.params:
            return ''
        return self.params[-1]

    def copy(self):
        """ Return a fully independent copy of this message. """
        prefix = self.prefix.copy() if self.prefix is not None else None
        return self.__class__(self.command, self.params, prefix=prefix, tags=self.tags.copy(), _trailing=self._trailing)

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def __eq__(self, other):
        if not isinstance(other, Message):
            return NotImplemented
        # An empty source is equivalent to no source at all.
        return (self.command == other.command and self.params == other.params and
                (self.prefix or None) == (other.prefix or None) and self.tags == other.tags)

    def __repr__(self):
        return '{mod}.{cls}({cmd!r}, {params!r}, prefix={prefix!r}, tags={tags!r})'.format(
            mod=__name__, cls=self.__class__.__name__,
            cmd=self.command, params=self.params, prefix=self.prefix, tags=dict(self.tags))


def parse_message(line, encoding=protocol.DEFAULT_ENCODING):
    """ Parse a single IRC line into a Message. """
    return Message.parse(line, encoding=encoding)
