"""Shared test fixtures."""

from __future__ import annotations

import threading
import time

import pytest

from svg_opti_detector.errors import OptimizerError
from svg_opti_detector.models import OptimizedSvg, SvgAttributes, SvgElement


STAR_PATH = "M12 2l3.09 6.26L22 9.27l-5 4.87L18.18 22 12 18.77 5.82 22 7 14.14l-5-4.87 6.91-1.01L12 2z"

PAGE_HTML = f'''
<html>
  <body>
    <svg class="icon" width="24" height="24">
      <path d="{STAR_PATH}"/>
    </svg>
    <svg id="logo" viewBox="0 0 100 100">
      <circle cx="50" cy="50" r="40"/>
    </svg>
  </body>
</html>
'''

DUPLICATE_PAGE_HTML = '''
<html><body>
  <svg class="icon-a" viewBox="0 0 10 10"><circle cx="5" cy="5" r="4"></circle></svg>
  <svg class="icon-b" viewBox="0 0 10 10"><circle cx="5" cy="5" r="4"></circle></svg>
  <svg viewBox="0 0 10 10"><rect width="4" height="4"></rect></svg>
</body></html>
'''

# Standalone SVG with plenty of removable content.
VERBOSE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24">
  <!-- exported from an editor -->
  <metadata>
    <author>Someone</author>
  </metadata>
  <g>
    <circle    cx="12.000000"   cy="12.000000"   r="10.000000"   fill="#ff0000" />
  </g>
</svg>'''

MALFORMED_SVG = "<svg><path d='M0 0'></svg>"


def make_svg(index: int, css_class: str | None = None) -> SvgElement:
    """Build a distinct inline SVG record keyed by ``index``."""
    class_attr = f' class="{css_class}"' if css_class else ""
    html = f'<svg{class_attr} viewBox="0 0 10 10"><circle cx="{index}" cy="5" r="4"></circle></svg>'
    return SvgElement(html=html, attributes=SvgAttributes(class_=css_class, view_box="0 0 10 10"))


class HalvingOptimizer:
    """Returns the first half of the input; fails for markup containing a marker."""

    def __init__(self, fail_marker: str | None = None, delay: float = 0.0) -> None:
        self.fail_marker = fail_marker
        self.delay = delay
        self.calls = 0
        self.active = 0
        self.max_active = 0
        self._lock = threading.Lock()

    def optimize(self, svg: str) -> OptimizedSvg:
        with self._lock:
            self.calls += 1
            self.active += 1
            self.max_active = max(self.max_active, self.active)
        try:
            if self.delay:
                time.sleep(self.delay)
            if self.fail_marker and self.fail_marker in svg:
                raise OptimizerError("cannot parse SVG")
            return OptimizedSvg(data=svg[: len(svg) // 2])
        finally:
            with self._lock:
                self.active -= 1


@pytest.fixture
def page_html() -> str:
    return PAGE_HTML


@pytest.fixture
def duplicate_page_html() -> str:
    return DUPLICATE_PAGE_HTML


@pytest.fixture
def optimizer() -> HalvingOptimizer:
    return HalvingOptimizer()
