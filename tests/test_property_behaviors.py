"""Property-based tests for the salutation functions.

Hypothesis generates arbitrary text so the concatenation contracts hold
for every representable name, not just hand-picked examples.
"""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from cincinnati.domain.behaviors import SalutationTemplate, bye, greeting


@pytest.mark.os_agnostic
@given(name=st.text())
@settings(max_examples=300)
def test_greeting_is_hello_plus_name(name: str) -> None:
    """greeting(n) == "Hello, " + n for all text n."""
    assert greeting(name) == "Hello, " + name


@pytest.mark.os_agnostic
@given(name=st.text())
@settings(max_examples=300)
def test_bye_is_bye_plus_name_plus_bang(name: str) -> None:
    """bye(n) == "Bye, " + n + "!" for all text n."""
    assert bye(name) == "Bye, " + name + "!"


@pytest.mark.os_agnostic
@given(name=st.text())
def test_repeated_calls_return_equal_output(name: str) -> None:
    """Pure functions: the same input always yields the same output."""
    assert greeting(name) == greeting(name)
    assert bye(name) == bye(name)


@pytest.mark.os_agnostic
@given(prefix=st.text(), name=st.text(), suffix=st.text())
def test_template_output_decomposes_into_its_parts(prefix: str, name: str, suffix: str) -> None:
    """Rendered text starts with the prefix, ends with the suffix and keeps the name in between."""
    rendered = SalutationTemplate(prefix=prefix, suffix=suffix).render(name)

    assert rendered.startswith(prefix)
    assert rendered.endswith(suffix)
    assert rendered[len(prefix) : len(rendered) - len(suffix)] == name
