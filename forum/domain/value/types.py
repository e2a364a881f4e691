"""Domain constants shared across entities."""

# Shown in place of the content of a soft-deleted comment or reply.
DELETED_COMMENT_PLACEHOLDER = "**komentar telah dihapus**"
DELETED_REPLY_PLACEHOLDER = "**balasan telah dihapus**"
