import io
import pytest
import matcalc as mc


@pytest.fixture(autouse=True)
def configuration():
    """Provide default settings to every test and restore them afterwards."""
    conf = mc.Configuration()
    conf.reset()
    yield conf
    conf.reset()


@pytest.fixture(params=[1, 2, 3, 4, 5], scope="session")
def size(request: pytest.FixtureRequest) -> int:
    """Provide session-level fixture for square matrix sizes."""
    return request.param


@pytest.fixture(params=range(8), scope="session")
def seed(request: pytest.FixtureRequest) -> int:
    """Provide session-level fixture for random seeds."""
    return request.param


@pytest.fixture
def matrix_a() -> mc.Matrix:
    return mc.Matrix.from_rows([[1, 2], [3, 4]])


@pytest.fixture
def symbols() -> mc.SymbolTable:
    table = mc.SymbolTable()
    table.assign('A', mc.Matrix.from_rows([[1, 1], [1, 1]]))
    table.assign('B', mc.identity(2))
    table.assign('C', mc.Matrix.from_rows([[1, 2, 3], [4, 5, 6]]))
    table.assign('D', mc.Matrix.from_rows([[1, 2], [3, 4]]))
    return table


@pytest.fixture
def session(symbols) -> mc.Session:
    return mc.Session(symbols, out=io.StringIO())
