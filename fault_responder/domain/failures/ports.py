"""
Port interfaces (ABCs) for the failures bounded context.

The pipeline catches a failure, decides its category and hands the
failure context to an ExceptionHandler. Infrastructure responders
implement this interface; the domain never depends on them.
"""

from abc import ABC, abstractmethod

from fault_responder.domain.failures.entities import ErrorCategory, FailureContext


class ExceptionHandler(ABC):
    """Port for turning a failed request into an error response.

    Implementations rewrite ``context.response`` in place and return
    nothing. They never decide the category themselves.
    """

    @abstractmethod
    def handle(self, context: FailureContext, category: ErrorCategory) -> None:
        """Write the error response for a failure of the given category."""
        raise NotImplementedError

    def handle_recoverable_exception(self, context: FailureContext) -> None:
        """Handle a retryable failure that has exhausted its retries."""
        self.handle(context, ErrorCategory.RECOVERABLE)

    def handle_irrecoverable_exception(self, context: FailureContext) -> None:
        """Handle a failure that retrying cannot fix."""
        self.handle(context, ErrorCategory.IRRECOVERABLE)

    def handle_validation_exception(self, context: FailureContext) -> None:
        """Handle an invalid request."""
        self.handle(context, ErrorCategory.VALIDATION)

    def handle_authorization_exception(self, context: FailureContext) -> None:
        """Handle an unauthorized request."""
        self.handle(context, ErrorCategory.AUTHORIZATION)

    def handle_transformation_exception(self, context: FailureContext) -> None:
        """Handle a failure while transforming a message."""
        self.handle(context, ErrorCategory.TRANSFORMATION)
