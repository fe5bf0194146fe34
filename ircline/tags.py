## tags.py
# IRCv3 message tag block parsing and construction.
import collections.abc
import logging

from . import escaping, protocol

__all__ = [ 'Tags', 'parse_tags', 'construct_tags' ]

logger = logging.getLogger(__name__)


class Tags(collections.abc.MutableMapping):
    """
    Message tags, mapping tag keys to their unescaped values.
    A value of '' denotes a flag tag without value. Iteration order is not part of the contract.
    """
    def __init__(self, *args, **kwargs):
        self.storage = {}
        self.update(dict(*args, **kwargs))

    @classmethod
    def parse(cls, raw):
        """ Parse a raw tag block (without the leading indicator) into a Tags instance. Never fails. """
        tags = cls()

        for raw_tag in raw.split(protocol.TAG_SEPARATOR):
            key, _, value = raw_tag.partition(protocol.TAG_VALUE_SEPARATOR)
            if not key:
                logger.debug('Skipping tag without key in tag block: %r', raw)
                continue

            tags[key] = escaping.decode(value)

        return tags

    def construct(self):
        """ Construct the raw tag block, without the leading indicator. """
        raw_tags = []
        for key, value in self.storage.items():
            if value:
                raw_tags.append(key + protocol.TAG_VALUE_SEPARATOR + escaping.encode(value))
            else:
                raw_tags.append(key)

        return protocol.TAG_SEPARATOR.join(raw_tags)

    serialize = construct

    def get(self, key):
        """ Look up a tag. Returns a (value, present) tuple; missing tags yield ('', False). """
        try:
            return self.storage[key], True
        except KeyError:
            return '', False

    def copy(self):
        return self.__class__(self.storage)

    def __getitem__(self, key):
        return self.storage[key]

    def __setitem__(self, key, value):
        if not isinstance(key, str):
            raise TypeError('Tag keys must be strings, not {}'.format(type(key).__name__))
        if not key:
            raise ValueError('Tag keys must not be empty.')
        if value is None:
            value = ''
        if not isinstance(value, str):
            raise TypeError('Tag values must be strings, not {}: use \'\' for flag tags.'.format(type(value).__name__))
        self.storage[key] = value

    def __delitem__(self, key):
        del self.storage[key]

    def __iter__(self):
        return iter(self.storage)

    def __len__(self):
        return len(self.storage)

    def __str__(self):
        return self.construct()

    def __repr__(self):
        return '{mod}.{cls}({dict})'.format(
            mod=__name__, cls=self.__class__.__name__, dict=self.storage)


def parse_tags(raw):
    return Tags.parse(raw)

def construct_tags(tags):
    if not isinstance(tags, Tags):
        tags = Tags(tags)
    return tags.construct()
