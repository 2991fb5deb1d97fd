"""Shared fixtures for core unit tests"""

import pytest


SAMPLE_MD = """\
# Demo

TOC:

## Alpha

text

## Bravo

text
"""

EXPECTED_MD = """\
# Demo

TOC:
* [Alpha](#alpha)
* [Bravo](#bravo)

## Alpha

text

## Bravo

text
"""

FENCED_MD = """\
## Real

```bash
## not a heading
```

    ## indented code

### Also real
"""


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD


@pytest.fixture(name="expected_md")
def expected_md_fixture():
    return EXPECTED_MD


@pytest.fixture(name="fenced_md")
def fenced_md_fixture():
    return FENCED_MD
