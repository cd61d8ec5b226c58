import pytest
from gaussquad.config import config

@pytest.fixture(params=['python', 'numba'])
def mode(request, monkeypatch):
    """Run test with both the Python and the Numba kernels"""
    if request.param == 'numba':
        pytest.importorskip('numba')
    monkeypatch.setitem(config['optimization'], 'mode', request.param)
    return request.param
