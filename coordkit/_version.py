# Copyright European Space Agency, 2013

__version__ = '1.0.0'
__version_info__ = tuple(int(n) for n in __version__.split('.'))
