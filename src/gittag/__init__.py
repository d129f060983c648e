"""gittag: create, push, find and delete git tags locally and on a remote.

The operations live on gittag.manager.TagManager; see `gittag --help` for
the command-line interface.
"""
