"""Custom exceptions for faqnav."""


class FaqNavError(Exception):
    """Base exception for faqnav operations."""


class DatasetError(FaqNavError):
    """The loaded FAQ dataset cannot be used."""


class EmptyDatasetError(DatasetError):
    """Dataset loaded successfully but contains zero records."""


class StructuralInconsistencyError(DatasetError):
    """A section mixes records with and without a subject."""


class DuplicateRecordError(DatasetError):
    """Two records share an id or a (category, section, subject, question) tuple."""


class RecordParseError(DatasetError):
    """Dataset payload is not a valid list of FAQ records."""


class DatasetNotFoundError(DatasetError):
    """Dataset source does not exist."""


class DatasetReadError(DatasetError):
    """Dataset file exists but cannot be read."""


class FetchError(FaqNavError):
    """Error during dataset fetching."""


class UnresolvableStateError(FaqNavError):
    """Reconciliation failed to reach a valid navigation state."""
