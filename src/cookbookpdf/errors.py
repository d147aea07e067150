class CookbookPdfError(Exception):
    pass


class ConfigError(CookbookPdfError):
    pass


class MissingFileError(CookbookPdfError):
    pass


class RequestValidationError(CookbookPdfError):
    pass


class CompositionError(CookbookPdfError):
    pass


class RenderError(CookbookPdfError):
    pass


class PublishError(CookbookPdfError):
    pass
