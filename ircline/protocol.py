## protocol.py
# IRC wire constants and errors.
import re
from abc import abstractmethod

DEFAULT_ENCODING = 'utf-8'
FALLBACK_ENCODING = 'iso-8859-1'


## Message parsing.

LINE_TERMINATORS = '\r\n'
ARGUMENT_SEPARATOR = re.compile(' +', re.UNICODE)

TAG_INDICATOR = '@'
TAG_SEPARATOR = ';'
TAG_VALUE_SEPARATOR = '='

SOURCE_INDICATOR = ':'
USER_SEPARATOR = '!'
HOST_SEPARATOR = '@'

TRAILING_PREFIX = ':'
TRAILING_SEPARATOR = ' ' + TRAILING_PREFIX


## Errors.

class Error(Exception):
    """ Base class for all ircline errors. """
    pass


class ProtocolViolation(Error):
    """ An error that occurred while parsing an IRC message that violates the IRC protocol. """
    def __init__(self, msg, message):
        super().__init__(msg)
        self.irc_message = message


class EmptyMessage(ProtocolViolation):
    def __init__(self, message=''):
        super().__init__('Can\'t parse a zero length message.', message=message)


class NoCommand(ProtocolViolation):
    def __init__(self, message, msg='No command in message.'):
        super().__init__(msg, message=message)


class NoDataAfterTags(NoCommand):
    def __init__(self, message):
        super().__init__(message, msg='No data after tags.')


class NothingAfterPrefix(NoCommand):
    def __init__(self, message):
        super().__init__(message, msg='No data after prefix.')


## Bases.

class Message:
    """ Abstract message class. Messages must inherit from this class. """
    @classmethod
    @abstractmethod
    def parse(cls, line, encoding=DEFAULT_ENCODING):
        """ Parse data into IRC message. Return a Message instance or raise an error. """
        raise NotImplementedError()

    @abstractmethod
    def construct(self):
        """ Convert message into raw IRC line, without line terminator. """
        raise NotImplementedError()

    def serialize(self):
        return self.construct()

    def __str__(self):
        return self.construct()
