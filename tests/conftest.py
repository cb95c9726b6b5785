"""Pytest fixtures."""

from __future__ import annotations

import pathlib

import geom2d
import pytest

SAMPLE_SVG = """<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100">
  <title>Sample</title>
  <g id="g1" stroke="#000" stroke-width="2">
    <path id="p1" style="fill:red;opacity:0.5" d="M0 0 L10-5z"/>
  </g>
</svg>
"""


@pytest.fixture(scope='session', autouse=True)
def _initialize() -> None:
    geom2d.set_epsilon(1e-8)


@pytest.fixture
def sample_svg(tmp_path: pathlib.Path) -> pathlib.Path:
    """A small SVG document on disk."""
    path = tmp_path / 'sample.svg'
    path.write_text(SAMPLE_SVG, encoding='utf8')
    return path
