"""Tests for the project scanner."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from sessionizer.exceptions import ProjectScanError
from sessionizer.services.scanner import ProjectScanner


def test_scan_keeps_only_directories(projects_root: Path) -> None:
    candidates = ProjectScanner().scan([projects_root])

    assert {c.path for c in candidates} == {projects_root / n for n in ('siteA', 'client.v2', 'api')}
    assert {c.label for c in candidates} == {'work/siteA', 'work/client.v2', 'work/api'}


def test_scan_name_style(projects_root: Path) -> None:
    candidates = ProjectScanner(style='name').scan([projects_root])

    assert {c.label for c in candidates} == {'siteA', 'client.v2', 'api'}


def test_direct_projects_come_first_and_are_not_validated(projects_root: Path, tmp_path: Path) -> None:
    missing = tmp_path / 'does' / 'not-exist'
    a_file = projects_root / 'notes.txt'

    candidates = ProjectScanner().scan([projects_root], [missing, a_file])

    assert [c.path for c in candidates[:2]] == [missing, a_file]
    assert [c.label for c in candidates[:2]] == ['does/not-exist', 'work/notes.txt']
    assert len(candidates) == 5


def test_parents_are_processed_in_argument_order(tmp_path: Path) -> None:
    for parent, child in (('one', 'a'), ('two', 'b')):
        (tmp_path / parent / child).mkdir(parents=True)

    candidates = ProjectScanner().scan([tmp_path / 'two', tmp_path / 'one'])

    assert [c.label for c in candidates] == ['two/b', 'one/a']


def test_same_directory_twice_is_not_deduplicated(projects_root: Path) -> None:
    candidates = ProjectScanner().scan([projects_root, projects_root])

    assert len(candidates) == 6


def test_symlink_to_directory_counts_and_broken_symlink_is_skipped(projects_root: Path, tmp_path: Path) -> None:
    target = tmp_path / 'elsewhere'
    target.mkdir()
    os.symlink(target, projects_root / 'linked')
    os.symlink(tmp_path / 'gone', projects_root / 'broken')

    labels = {c.label for c in ProjectScanner().scan([projects_root])}

    assert 'work/linked' in labels
    assert 'work/broken' not in labels


def test_empty_directory_yields_nothing(tmp_path: Path) -> None:
    assert ProjectScanner().scan([tmp_path]) == []


def test_missing_parent_directory_raises(tmp_path: Path) -> None:
    missing = tmp_path / 'missing'

    with pytest.raises(ProjectScanError) as exc_info:
        ProjectScanner().scan([missing])

    assert exc_info.value.directory == missing
    assert str(missing) in str(exc_info.value)


def test_parent_that_is_a_file_raises(projects_root: Path) -> None:
    with pytest.raises(ProjectScanError):
        ProjectScanner().scan([projects_root / 'notes.txt'])


@pytest.mark.parametrize('relative', ['.', '../work'])
def test_relative_parent_gives_same_labels_as_absolute(
    projects_root: Path, monkeypatch: pytest.MonkeyPatch, relative: str
) -> None:
    monkeypatch.chdir(projects_root)

    candidates = ProjectScanner().scan([Path(relative)])

    assert {c.label for c in candidates} == {c.label for c in ProjectScanner().scan([projects_root])}
    assert {c.path for c in candidates} == {Path(relative) / n for n in ('siteA', 'client.v2', 'api')}


def test_grandparent_relative_parent_uses_real_directory_names(
    projects_root: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(projects_root / 'siteA')

    candidates = ProjectScanner().scan([Path('..')])

    assert {c.label for c in candidates} == {'work/siteA', 'work/client.v2', 'work/api'}
    assert {c.session_name for c in candidates} == {'work/siteA', 'work/client_v2', 'work/api'}
