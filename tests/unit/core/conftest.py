"""Shared fixtures for core unit tests"""

import pytest


SAMPLE_MD = """\
# Getting Started

Install the package first.

- download
- unpack
- run

```bash
pip install mdforge
# not a heading
```

---

> Quoted line

1. one
2. two
"""


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD
