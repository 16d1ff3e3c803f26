"""
Domain exceptions
"""


class BlogError(Exception):
    """Base class for errors raised by the blog services"""

    status_code = 500
    message = "Internal error"

    def __init__(self, message: str = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class InvalidPublishDateError(BlogError, ValueError):
    """A publishedAt value could not be parsed into a timestamp"""

    status_code = 422
    message = "Invalid publish date"


class SlugConflictError(BlogError):
    """The resolved slug was taken by a concurrent write, even after retrying"""

    status_code = 409
    message = "Slug already taken by a concurrent write, try again"

    def __init__(self, slug: str):
        super().__init__(f"Slug '{slug}' was taken by a concurrent write, try again")
        self.slug = slug


class EmptyUploadError(BlogError):
    status_code = 400
    message = "No file uploaded"


class MediaTooLargeError(BlogError):
    status_code = 413
    message = "File too large"


class UnsupportedMediaTypeError(BlogError):
    status_code = 415
    message = "Unsupported file type"
