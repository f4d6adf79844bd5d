#
# This file is distributed under the MIT License. See LICENSE.md for details.
#

import pytest

from gitstream.errors import MalformedLocator
from gitstream.streamwrapper import GLOBAL_PATH_HOST, ParsedComponents, parse_locator
from gitstream.streamwrapper.locator import relocate_fragment, rewrite_global_host


def test_global_host():
    assert parse_locator("git:///a/b", "git") == ParsedComponents(
        scheme="git",
        host=GLOBAL_PATH_HOST,
        path="/a/b",
    )


def test_explicit_host_is_kept():
    components = parse_locator("git://example/a/b", "git")
    assert components.host == "example"
    assert components.path == "/a/b"


def test_global_host_only_for_own_scheme():
    assert rewrite_global_host("svn:///a", "git") == "svn:///a"
    assert rewrite_global_host("git:///a", "git") == f"git://{GLOBAL_PATH_HOST}/a"
    assert rewrite_global_host("GIT:///a", "git") == f"GIT://{GLOBAL_PATH_HOST}/a"


def test_drive_letter():
    assert parse_locator("git://host//C:/foo", "git").path == "C:/foo"
    assert parse_locator("git:///C:/repo/file.txt", "git").path == "C:/repo/file.txt"


def test_drive_letter_without_host():
    components = parse_locator("git://C:/repo/file.txt", "git")
    assert components.host is None
    assert components.path == "C:/repo/file.txt"


def test_backslashes():
    components = parse_locator("git:///C:\\repo\\dir\\file.txt", "git")
    assert components.host == GLOBAL_PATH_HOST
    assert components.path == "C:/repo/dir/file.txt"


def test_separator_runs_collapse():
    assert parse_locator("git:///a//b///c", "git").path == "/a/b/c"
    assert parse_locator("git:////a/b", "git").path == "/a/b"


def test_fragment_relocation():
    components = parse_locator("git://h/a#rev/file.txt", "git")
    # `h` is the host, so it is not part of the path
    assert components.host == "h"
    assert components.path == "/a/file.txt"
    assert components.fragment == "rev"


def test_fragment_relocation_with_query():
    components = parse_locator("git:///repo/dir#v1/file?x=1", "git")
    assert components.path == "/repo/dir/file"
    assert components.query == "x=1"
    assert components.fragment == "v1"


def test_relocate_fragment_first_occurrence_only():
    assert relocate_fragment("git:///a#one/b#two/c") == "git:///a/b#two/c#one"


def test_relocate_fragment_skips_empty_tokens():
    assert relocate_fragment("git:///a#/b#rev/c") == "git:///a#/b/c#rev"
    assert relocate_fragment("#a/b") == "#a/b"


def test_relocate_fragment_at_end():
    assert relocate_fragment("git:///a/b#rev") == "git:///a/b#rev"
    assert relocate_fragment("git:///a/b") == "git:///a/b"


def test_ref_before_query():
    components = parse_locator("git:///repo/file#v1.0?a=1&b=2", "git")
    assert components.fragment == "v1.0"
    assert components.query == "a=1&b=2"


def test_query_before_ref():
    components = parse_locator("git:///repo/file?a=1#v1.0", "git")
    assert components.fragment == "v1.0"
    assert components.query == "a=1"


def test_absent_and_empty_components():
    components = parse_locator("git:///repo/file", "git")
    assert components.query is None
    assert components.fragment is None

    components = parse_locator("git:///repo/file?", "git")
    assert components.query == ""
    assert components.fragment is None

    components = parse_locator("git:///repo/file#HEAD?", "git")
    assert components.query == ""
    assert components.fragment == "HEAD"


def test_missing_path():
    components = parse_locator("git://host#rev", "git")
    assert components.host == "host"
    assert components.path is None
    assert components.fragment == "rev"


@pytest.mark.parametrize("raw", ["", "   ", "/just/a/path", "git://[::1/a"])
def test_malformed(raw):
    with pytest.raises(MalformedLocator):
        parse_locator(raw, "git")


def test_deterministic():
    raw = "git:///repo\\dir#main/file.txt?mode=r"
    assert parse_locator(raw, "git") == parse_locator(raw, "git")
