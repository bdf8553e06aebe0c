"""Errors that end a branch selection session.

Every error here is mapped to exit status 1 and a one-line diagnostic at the
CLI boundary. Failures to resolve an individual branch are not errors: the
catalog drops such branches silently.
"""


class SelectBranchError(Exception):
    """Base class for failures reported to the user.

    Attributes:
        step: Short name of the pipeline step that failed, used as a
            prefix in the diagnostic
    """

    step = "select-branch"

    def __str__(self) -> str:
        return f"{self.step}: {super().__str__()}"


class DiscoveryError(SelectBranchError):
    """No repository was found at or above the working directory."""

    step = "discover repository"


class ConfigurationError(SelectBranchError):
    """A select-branch.* configuration key holds a malformed value.

    Attributes:
        key: The offending configuration key
    """

    step = "read configuration"

    def __init__(self, key: str, message: str) -> None:
        self.key = key
        super().__init__(message)


class RepositoryError(SelectBranchError):
    """A git command needed to list branches failed."""

    step = "list branches"


class PresentationError(SelectBranchError):
    """The interactive picker could not be shown or failed while running."""

    step = "show picker"


class CheckoutError(SelectBranchError):
    """One of the checkout steps failed.

    Attributes:
        refname: The fully-qualified reference that was being checked out
    """

    step = "checkout"

    def __init__(self, refname: str, cause: Exception) -> None:
        self.refname = refname
        self.cause = cause
        super().__init__(f"could not check out '{refname}': {cause}")
