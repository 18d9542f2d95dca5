"""Value sources used by :meth:`gridmat.dense.Matrix.populate`.

A source answers ``value_at(i, j)`` with one raw value for the cell; the
matrix converts it to its dtype. Any plain callable ``(i, j) -> value`` works
as well, these classes cover the common cases.
"""

import io
import logging

from .errors import InputExhausted, InvalidFormat

logger = logging.getLogger(__name__)


class ValueSource:
    """Base class for value sources."""

    def value_at(self, i, j):
        raise NotImplementedError

    def __call__(self, i, j):
        return self.value_at(i, j)


class SequenceSource(ValueSource):
    """Serve values from an iterable, one per request.

    Parameters
    ----------
    values : iterable
        Values in the order cells are requested (row-major for ``populate``).
    """

    def __init__(self, values):
        self._it = iter(values)
        self.consumed = 0

    def value_at(self, i, j):
        try:
            value = next(self._it)
        except StopIteration:
            raise InputExhausted((i, j)) from None
        self.consumed += 1
        return value


class TextSource(ValueSource):
    """Serve whitespace-separated tokens read from text.

    Parameters
    ----------
    text : str or file-like
        Either the full text or a stream read lazily line by line.

    Notes
    -----
    Tokens are returned as strings; the matrix parses them with its dtype and
    raises :class:`InvalidFormat` for tokens that do not parse.
    """

    def __init__(self, text):
        self._stream = io.StringIO(text) if isinstance(text, str) else text
        self._pending = []

    def value_at(self, i, j):
        while not self._pending:
            line = self._stream.readline()
            if not line:
                raise InputExhausted((i, j))
            self._pending = line.split()[::-1]
        return self._pending.pop()


class PromptSource(ValueSource):
    """Ask for every value interactively.

    Parameters
    ----------
    input_fn : callable, optional
        Prompt function with the signature of :func:`input`.
    prompt : str, optional
        Format string receiving ``i`` and ``j``.
    """

    def __init__(self, input_fn=input, prompt="Value [{i}][{j}]: "):
        self._input = input_fn
        self._prompt = prompt

    def value_at(self, i, j):
        try:
            answer = self._input(self._prompt.format(i=i, j=j))
        except EOFError:
            raise InputExhausted((i, j)) from None
        answer = answer.strip()
        if not answer:
            raise InvalidFormat(answer, (i, j))
        logger.debug("read %r for cell (%d, %d)", answer, i, j)
        return answer


__all__ = ["ValueSource", "SequenceSource", "TextSource", "PromptSource"]
