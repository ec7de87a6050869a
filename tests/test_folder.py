import os

from hypothesis import given
from hypothesis import strategies as st

from traa.folder import (
    append_filename,
    create_folder,
    get_config_folder,
    get_current_folder,
    get_directory,
    get_file_extension,
    get_filename,
    get_temp_folder,
    is_directory,
)


def test_get_filename():
    assert get_filename("a/b/c.txt") == "c.txt"
    assert get_filename("c.txt") == "c.txt"
    assert get_filename("a/b/") == ""
    assert get_filename("") == ""


def test_get_directory():
    assert get_directory("a/b/c.txt") == "a/b/"
    assert get_directory("a/b/") == "a/b/"
    assert get_directory("/abc") == ""
    assert get_directory("x") == ""
    assert get_directory("") == ""


def test_get_file_extension():
    assert get_file_extension("a/b.tar.gz") == ".gz"
    assert get_file_extension("dir.d/file") == ""
    assert get_file_extension("") == ""
    assert get_file_extension("traa.log") == ".log"


def test_is_directory():
    assert is_directory("a/")
    assert not is_directory("a")
    assert not is_directory("")


def test_append_filename():
    assert append_filename("", "traa.log") == "traa.log"
    assert append_filename("dir", "") == "dir"
    assert append_filename("dir", None) == "dir"
    assert append_filename("dir/", "traa.log") == "dir/traa.log"
    assert append_filename("dir", "traa.log") == "dir" + os.sep + "traa.log"


@given(
    st.text(alphabet="abcxyz/", min_size=1, max_size=20),
    st.text(alphabet="abcxyz.", min_size=1, max_size=20),
)
def test_append_then_split_round_trip(directory, filename):
    joined = append_filename(directory, filename)
    assert get_filename(joined) == filename
    assert joined.startswith(directory)


def test_create_folder(tmp_path):
    target = tmp_path / "new"
    assert create_folder(str(target))
    assert target.is_dir()
    assert create_folder(str(target))


def test_create_folder_failures(tmp_path):
    assert not create_folder("")
    assert not create_folder(str(tmp_path / "missing" / "child"))


def test_well_known_folders():
    temp = get_temp_folder()
    current = get_current_folder()
    config = get_config_folder()
    assert len(temp) > 0 and os.path.isdir(temp) is True
    assert len(current) > 0 and os.path.isdir(current) is True
    assert os.path.isabs(config) is True
    assert create_folder(temp) is True
    assert create_folder(current) is True