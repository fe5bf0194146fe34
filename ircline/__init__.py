from . import protocol, escaping, tags, prefix, message

from .protocol import Error, ProtocolViolation, EmptyMessage, NoCommand, NoDataAfterTags, NothingAfterPrefix
from .escaping import decode, encode
from .tags import Tags, parse_tags, construct_tags
from .prefix import Prefix, parse_prefix
from .message import Message, parse_message

__name__ = 'ircline'
__version__ = '0.1.0'
__version_info__ = (0, 1, 0)
__license__ = 'BSD'
