## prefix.py
# Message source (prefix) parsing and construction.
from . import protocol

__all__ = [ 'Prefix', 'parse_prefix' ]


class Prefix:
    """
    Message source: a nickname or server name, optionally followed by user and host.
    Absent parts are empty strings. None of the parts are escaped.
    """
    def __init__(self, name='', user='', host=''):
        self.name = name
        self.user = user
        self.host = host

    @classmethod
    def parse(cls, raw):
        """ Parse name(!user)?(@host)? structure. Never fails. """
        raw, _, host = raw.partition(protocol.HOST_SEPARATOR)
        name, _, user = raw.partition(protocol.USER_SEPARATOR)
        return cls(name, user, host)

    def construct(self):
        raw = self.name
        if self.user:
            raw += protocol.USER_SEPARATOR + self.user
        if self.host:
            raw += protocol.HOST_SEPARATOR + self.host
        return raw

    serialize = construct

    def copy(self):
        return self.__class__(self.name, self.user, self.host)

    def __bool__(self):
        return bool(self.name or self.user or self.host)

    def __eq__(self, other):
        if not isinstance(other, Prefix):
            return NotImplemented
        return (self.name, self.user, self.host) == (other.name, other.user, other.host)

    def __str__(self):
        return self.construct()

    def __repr__(self):
        return '{mod}.{cls}(name={n!r}, user={u!r}, host={h!r})'.format(
            mod=__name__, cls=self.__class__.__name__, n=self.name, u=self.user, h=self.host)


def parse_prefix(raw):
    return Prefix.parse(raw)
