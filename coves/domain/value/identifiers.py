"""Strongly typed identifiers for Coves records.

Comments and posts are atProto records, identified by their AT-URI
(e.g. ``at://did:plc:abc/social.coves.community.comment/3k...``).
"""

from typing import NewType

CommentId = NewType("CommentId", str)
PostUri = NewType("PostUri", str)
