"""Testing utilities"""


class FakeClock:
    """Stand-in for the ``time`` module.

    Time only advances when ``sleep`` is called. Every requested sleep is
    recorded in ``sleeps``.

    :param interrupt_on: Number of the sleep call (1-based) that raises
                         KeyboardInterrupt instead of sleeping
    """

    def __init__(self, interrupt_on=None):
        self.now = 0.0
        self.sleeps = []
        self.interrupt_on = interrupt_on

    def monotonic(self):
        """Return the current fake time."""
        return self.now

    def sleep(self, seconds):
        """Advance the fake time by `seconds`."""
        if len(self.sleeps) + 1 == self.interrupt_on:
            raise KeyboardInterrupt
        self.sleeps.append(seconds)
        self.now += seconds


class Sequence:
    """Operation returning the given values in order.

    The last value is repeated once the others have been used. Number of
    calls is counted in ``calls``.
    """

    def __init__(self, *values):
        self.values = list(values)
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.values[min(self.calls, len(self.values)) - 1]
