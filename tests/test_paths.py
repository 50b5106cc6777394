"""Tests for label and session-name helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from sessionizer.paths import display_name, session_name


@pytest.mark.parametrize(
    ('path', 'style', 'expected'),
    [
        ('/home/me/work/siteA', 'parent', 'work/siteA'),
        ('/home/me/work/siteA', 'name', 'siteA'),
        ('/home/me/work/siteA/', 'parent', 'work/siteA'),
        ('/siteA', 'parent', 'siteA'),
    ],
)
def test_display_name(path: str, style: str, expected: str) -> None:
    assert display_name(Path(path), style) == expected  # type: ignore[arg-type]


def test_display_name_of_current_directory_uses_its_real_name(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    project = tmp_path / 'proj'
    project.mkdir()
    monkeypatch.chdir(project)

    assert display_name(Path('.')) == f'{tmp_path.name}/proj'


def test_display_name_preserves_order_and_count() -> None:
    paths = [Path('/a/x'), Path('/b/x'), Path('/a/x'), Path('/c/y')]

    labels = [display_name(p) for p in paths]

    assert labels == ['a/x', 'b/x', 'a/x', 'c/y']


@pytest.mark.parametrize(
    ('label', 'expected'),
    [
        ('client.v2', 'client_v2'),
        ('work/client.v2.beta', 'work/client_v2_beta'),
        ('host:8080', 'host_8080'),
        ('work/siteA', 'work/siteA'),
    ],
)
def test_session_name_replaces_separators(label: str, expected: str) -> None:
    assert session_name(label) == expected


def test_relative_paths_are_labelled_from_their_absolute_form(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    work = tmp_path / 'work'
    (work / 'siteA').mkdir(parents=True)
    monkeypatch.chdir(work)

    assert display_name(Path('siteA')) == 'work/siteA'
    assert display_name(Path('./siteA')) == 'work/siteA'
    assert display_name(Path('../work/siteA')) == 'work/siteA'
    assert display_name(Path('../work/siteA/..')) == f'{tmp_path.name}/work'
