"""Pytest configuration for reedstyle tests."""

import logging
import pytest

# Configure logging
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

@pytest.fixture(scope='session')
def sample_css():
    """Return generated-style CSS with layers but no hoistable repeats."""
    return """
    @layer settings, bridge, theme, free;

    @layer settings {
      :root {
        --rs-brand-a: oklch(62.31% 0.188 259.8);
        --rs-font-body: system-ui;
      }
    }

    @layer theme {
      reed {
        display: block;
      }

      /* Heading defaults */
      reed[as="h1"] { font-size: 2.5rem; font-weight: 700; margin: 0.67em 0; }
      reed[as="h2"] { font-size: 2rem; font-weight: 700; margin: 0.75em 0; }

      /* Paragraph and text defaults */
      reed[as="p"] { margin: 1em 0; }
      reed[as="strong"], reed[as="b"] { font-weight: bold; }
      reed[as="th"] { font-weight: bold; }
      reed[as="li"] { display: list-item; }
      reed[as="hr"] { border: none; border-top: 1px solid #ccc; margin: 2em 0; }
      reed[box="flat"] { padding: 0px 0px; }
    }
    """

@pytest.fixture(scope='session')
def plain_css():
    """Return CSS without at-rules."""
    return """
    .a { color: red; padding: 10px; }
    .b { color: red; padding: 10px; }
    .c { color: blue; }
    .d {
      margin: 0px 0em 0rem 0px;
      font-family: "Helvetica Neue",
        sans-serif;
    }
    """

@pytest.fixture(scope='session')
def repeated_css():
    """Return CSS where one long value repeats five times."""
    return ''.join(
        f".r{i} {{ border: 1px solid #e5e7eb; width: {i}px; }}\n" for i in range(1, 6)
    )
