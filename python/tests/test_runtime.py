import logging

import numpy as np
import pytest

import gridmat
from gridmat import DynamicMatrix, ShapeMismatch


def test_import():
    import importlib

    importlib.import_module("gridmat")
    assert isinstance(gridmat.__version__, str)


def test_print_precision_env_overrides(monkeypatch):
    monkeypatch.setattr(gridmat._runtime, "_current_precision", 2)
    monkeypatch.setenv("GRIDMAT_PRINT_PRECISION", "4")
    assert gridmat.get_print_precision() == 4
    monkeypatch.setenv("GRIDMAT_PRINT_PRECISION", "not-a-number")
    assert gridmat.get_print_precision() == 2


def test_set_print_precision(monkeypatch):
    monkeypatch.delenv("GRIDMAT_PRINT_PRECISION", raising=False)
    monkeypatch.setattr(gridmat._runtime, "_current_precision", 2)
    gridmat.set_print_precision(5)
    assert gridmat.get_print_precision() == 5
    with pytest.raises(ValueError):
        gridmat.set_print_precision(-1)


def test_set_print_delimiter(monkeypatch):
    monkeypatch.setattr(gridmat._runtime, "_current_delimiter", "|")
    with pytest.raises(ValueError):
        gridmat.set_print_delimiter("")
    gridmat.set_print_delimiter(",")
    assert gridmat.get_print_delimiter() == ","


def test_setup_logging_is_idempotent(tmp_path):
    log_file = tmp_path / "gridmat.log"
    logger = gridmat.setup_logging(logging.DEBUG, log_file=str(log_file))
    logger = gridmat.setup_logging(logging.DEBUG, log_file=str(log_file))
    try:
        assert logger.name == "gridmat"
        assert len(logger.handlers) == 2
        DynamicMatrix(2, 2).release()
        with pytest.raises(ShapeMismatch):
            DynamicMatrix(1, 1).add(DynamicMatrix(2, 2))
        for handler in logger.handlers:
            handler.flush()
        text = log_file.read_text(encoding="utf-8")
        assert "releasing 4 elements" in text
        assert "rejecting addition" in text
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(logging.NOTSET)


def test_error_hierarchy():
    assert issubclass(gridmat.OutOfBounds, IndexError)
    assert issubclass(gridmat.ShapeMismatch, ValueError)
    assert issubclass(gridmat.IncompatibleVariant, TypeError)
    assert issubclass(gridmat.InputExhausted, EOFError)
    assert issubclass(gridmat.InvalidFormat, ValueError)
    for exc in (
        gridmat.OutOfBounds,
        gridmat.ShapeMismatch,
        gridmat.IncompatibleVariant,
        gridmat.InputExhausted,
        gridmat.InvalidFormat,
    ):
        assert issubclass(exc, gridmat.MatrixError)


@pytest.mark.parametrize(
    "dtype,value,expected",
    [
        (np.int64, 3.0, 3),
        (np.float32, "2.5", 2.5),
        (np.complex128, "1+2j", 1 + 2j),
        (np.uint8, 255, 255),
    ],
)
def test_set_coerces(dtype, value, expected):
    A = DynamicMatrix(1, 1, dtype=dtype)
    A.set(0, 0, value)
    assert A.get(0, 0) == expected
    assert A.get(0, 0).dtype == np.dtype(dtype)


@pytest.mark.parametrize(
    "dtype,value",
    [(np.int64, 2.5), (np.uint8, 256), (np.uint8, -1), (np.float64, "abc"), (np.float64, 1 + 2j), (np.int64, None)],
)
def test_set_rejects(dtype, value):
    A = DynamicMatrix(1, 1, dtype=dtype)
    with pytest.raises(gridmat.InvalidFormat):
        A.set(0, 0, value)


def test_index_types():
    A = DynamicMatrix(2, 2)
    with pytest.raises(TypeError):
        A.get(0.0, 1)
    with pytest.raises(TypeError):
        A.get(True, 1)
    with pytest.raises(TypeError):
        A[0]
    assert A.get(np.int64(1), 1) == 0.0


def test_numpy_complex_with_imaginary_part_rejected():
    A = DynamicMatrix(1, 1)
    with pytest.raises(gridmat.InvalidFormat):
        A.set(0, 0, np.complex64(1 + 2j))
    assert A.get(0, 0) == 0.0
    I = DynamicMatrix(1, 1, dtype=np.int64)
    with pytest.raises(gridmat.InvalidFormat):
        I.set(0, 0, np.complex128(3 + 1j))
    F = gridmat.FixedMatrix[1, 1]()
    with pytest.raises(gridmat.InvalidFormat):
        F.assign(DynamicMatrix.from_rows([[1 + 2j]], dtype=np.complex64))
    assert F.get(0, 0) == 0.0


def test_numpy_complex_with_zero_imaginary_part_accepted():
    A = DynamicMatrix(1, 2, dtype=np.int64)
    A.set(0, 0, np.complex64(3 + 0j))
    A.set(0, 1, 4 + 0j)
    assert A.tolist() == [[3, 4]]


@pytest.mark.parametrize("dtype,value", [(np.float32, 1e300), (np.float32, 10**300), (np.complex64, 1e300 + 0j)])
def test_float_overflow_rejected(dtype, value):
    A = DynamicMatrix(1, 1, dtype=dtype)
    with pytest.raises(gridmat.InvalidFormat):
        A.set(0, 0, value)
    assert A.get(0, 0) == 0


def test_non_finite_values_pass_through():
    A = DynamicMatrix(1, 2, dtype=np.float32)
    A.set(0, 0, float("inf"))
    A.set(0, 1, float("nan"))
    assert np.isinf(A.get(0, 0))
    assert np.isnan(A.get(0, 1))


def test_env_precision_takes_precedence_over_setter(monkeypatch):
    monkeypatch.setattr(gridmat._runtime, "_current_precision", 2)
    monkeypatch.setenv("GRIDMAT_PRINT_PRECISION", "1")
    gridmat.set_print_precision(6)
    assert gridmat.get_print_precision() == 1
    monkeypatch.delenv("GRIDMAT_PRINT_PRECISION")
    assert gridmat.get_print_precision() == 6


def test_setup_logging_format(tmp_path):
    log_file = tmp_path / "format.log"
    logger = gridmat.setup_logging(logging.DEBUG, log_file=str(log_file))
    try:
        logging.getLogger("gridmat.dense.dynamic").debug("hello")
        for handler in logger.handlers:
            handler.flush()
        lines = log_file.read_text(encoding="utf-8").splitlines()
        assert lines[-1].endswith("DEBUG   gridmat.dense.dynamic: hello")
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(logging.NOTSET)
