# File: /listview/__init__.py | Version: 1.0 | Title: User directory list-view coordinator
"""
Reactive list view over a client-held user collection.

The view pipeline (filter -> sort -> paginate) lives in ``listview.view``;
``listview.main`` is the development users API the client talks to.
"""

__version__ = "1.0.0"
