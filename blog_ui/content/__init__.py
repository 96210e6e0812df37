from blog_ui.content.post_schema import (
    POST_COLLECTION,
    filename_from_path,
    post_url,
    validate_post,
)

__all__ = [
    'POST_COLLECTION',
    'filename_from_path',
    'post_url',
    'validate_post',
]
