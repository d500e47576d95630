"""Exceptions raised by assert_eventually."""
from hamcrest.core.string_description import StringDescription


class EventualAssertionError(AssertionError):
    """Expected condition did not hold by the final evaluation.

    :param message: Message supplied by the caller, may be empty
    :param description: Description of the expected condition
    :param actual: Value returned by the final evaluation
    :param mismatch: Matcher's explanation of the mismatch, defaults to
                     ``was <actual>``
    """

    def __init__(self, message, description, actual, mismatch=None):
        self.message = message
        self.description = description
        self.actual = actual
        if mismatch is None:
            mismatch = str(StringDescription().append_text("was ")
                           .append_description_of(actual))
        self.mismatch = mismatch
        super().__init__(self._format())

    def _format(self):
        text = StringDescription()
        if self.message:
            text.append_text(self.message).append_text("\n")
        text.append_text("Expected: ").append_text(self.description)
        text.append_text("\n     but: ").append_text(self.mismatch)
        return str(text)
