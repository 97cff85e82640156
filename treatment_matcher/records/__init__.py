"""
Record Store boundary.

Responsibilities:
- Load the exported photo table (CSV) into memory on first use.
- Convert raw photo records into candidate items with resolved display URLs.
- Drop photos without an image and surgical examples.
"""
