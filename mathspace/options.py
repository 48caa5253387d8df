from collections.abc import Mapping

from toolz import merge

__all__ = ['ImportOptions', 'defaults']

defaults = {
    'override' : False,
    'wrap'     : True,
}


class ImportOptions:
    """
    Read-only container for import options

    Caller supplied keys are merged over the defaults.  Keys the importer
    does not know about are kept.

    >>> opts = ImportOptions(override=True)
    >>> opts.override, opts.wrap
    (True, True)
    >>> opts['wrap']
    True
    """
    __slots__ = '_internal',

    def __init__(self, options=None, **kw):
        object.__setattr__(self, '_internal',
                           merge(defaults, options or {}, kw))

    @classmethod
    def coerce(cls, options):
        """ Build options from whatever was handed to ``import``

        >>> ImportOptions.coerce(None).override
        False
        >>> ImportOptions.coerce({'override': True}).override
        True
        """
        if isinstance(options, ImportOptions):
            return options
        if isinstance(options, Mapping):
            return cls(options)
        return cls()

    def get(self, key, default=None):
        return self._internal.get(key, default)

    def __getattr__(self, key):
        if key == '_internal':
            raise AttributeError(key)
        try:
            return self._internal[key]
        except KeyError:
            raise AttributeError(key)

    def __setattr__(self, key, value):
        raise AttributeError('%s is read-only' % type(self).__name__)

    def __getitem__(self, key):
        return self._internal[key]

    def __contains__(self, key):
        return key in self._internal

    def __len__(self):
        return len(self._internal)

    def __iter__(self):
        return iter(self._internal)

    def items(self):
        return self._internal.items()

    def __eq__(self, other):
        return (isinstance(other, ImportOptions) and
                self._internal == other._internal)

    def __ne__(self, other):
        return not self == other

    __hash__ = None

    def __repr__(self):
        return 'ImportOptions(%s)' % ', '.join(
            '%s=%r' % item for item in sorted(self._internal.items(),
                                           key=lambda item: str(item[0])))
