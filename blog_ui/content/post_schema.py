"""
Blog post collection schema.

Declares the fields the CMS editor exposes for posts stored under
``content/post`` and the router mapping a post document to its page URL.
Storage and Markdown rendering of the documents happen outside this
package.
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

POSTS_URL_PREFIX = "/posts"

# Python types accepted for each CMS field type; rich-text is either the raw
# Markdown body or the editor's parsed tree
FIELD_TYPES = {
    "boolean": (bool,),
    "string": (str,),
    "rich-text": (str, dict, list),
}

_FILENAME = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_\-]*$")


@dataclass(frozen=True)
class CollectionField:
    name: str
    label: str
    type: str
    is_body: bool = False


@dataclass(frozen=True)
class Collection:
    name: str
    label: str
    path: str
    fields: Tuple[CollectionField, ...]

    def field(self, name: str) -> Optional[CollectionField]:
        for field in self.fields:
            if field.name == name:
                return field
        return None

    @property
    def body_field(self) -> Optional[CollectionField]:
        return next((field for field in self.fields if field.is_body), None)


POST_COLLECTION = Collection(
    name="post",
    label="Blog Posts",
    path="content/post",
    fields=(
        CollectionField(name="published", label="Published", type="boolean"),
        CollectionField(name="title", label="Title", type="string"),
        CollectionField(name="body", label="Blog Post Body", type="rich-text", is_body=True),
    ),
)


def post_url(filename: str) -> str:
    """
    Page URL of a post, as used by the editor's live preview router.

    Args:
        filename: Document filename without extension

    Returns:
        str: The post path, e.g. ``/posts/hello-world``

    Raises:
        ValueError: If the filename cannot be used as a path segment
    """
    if not isinstance(filename, str) or not _FILENAME.match(filename):
        raise ValueError(f"Invalid post filename: {filename!r}")
    return f"{POSTS_URL_PREFIX}/{filename}"


def filename_from_path(pathname: Optional[str]) -> Optional[str]:
    """Inverse of ``post_url``; None when the path is not a post page."""
    if not pathname:
        return None
    prefix = POSTS_URL_PREFIX + "/"
    if not pathname.startswith(prefix):
        return None
    filename = pathname[len(prefix):].rstrip("/")
    if not _FILENAME.match(filename):
        return None
    return filename


def title_from_filename(filename: str) -> str:
    return " ".join(part.capitalize() for part in re.split(r"[-_]+", filename) if part)


def validate_post(document: Dict[str, Any], collection: Collection = POST_COLLECTION) -> List[str]:
    """
    Check a post document against the collection fields.

    Fields are optional, as in the editor; present fields must have the
    declared type and unknown fields are reported.

    Args:
        document: Front matter and body of the post
        collection: Collection to validate against

    Returns:
        list: Error messages, empty when the document is valid
    """
    if not isinstance(document, dict):
        return [f"Post document must be a mapping, got {type(document).__name__}"]

    errors = []
    for key, value in document.items():
        field = collection.field(key)
        if field is None:
            errors.append(f"Unknown field '{key}' for collection '{collection.name}'")
            continue
        if value is None:
            continue
        if not isinstance(value, FIELD_TYPES[field.type]):
            errors.append(
                f"Field '{key}' must be {field.type}, got {type(value).__name__}"
            )
    return errors
