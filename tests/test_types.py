from minishell.types import Command, FileType, RedirectFile


def test_cmd_create():
    cmd = Command.create("ls", ["ls", "-l"], None, None)
    assert cmd.command == "ls"
    assert len(cmd.args) == 2
    assert cmd.args[0] == "ls"
    assert cmd.args[1] == "-l"
    assert cmd.infile is None
    assert cmd.outfile is None


def test_cmd_create_copies_args():
    args = ["ls", "-l"]
    cmd = Command.create("ls", args, None, None)
    args.append("-a")
    assert cmd.args == ["ls", "-l"]


def test_cmd_create_missing_args():
    cmd = Command.create("ls", None, None, None)
    assert cmd.args is None


def test_cmd_create_with_files():
    infile = RedirectFile("infile", FileType.COMMON_FILE_IN)
    outfile = RedirectFile("append_file", FileType.APPEND_FILE, 3)
    cmd = Command.create("cat", ["cat"], infile, outfile)
    assert cmd.infile.path == "infile"
    assert cmd.infile.type is FileType.COMMON_FILE_IN
    assert cmd.infile.fd == 0
    assert cmd.outfile.path == "append_file"
    assert cmd.outfile.type is FileType.APPEND_FILE
    assert cmd.outfile.fd == 3


def test_redirect_file_heredoc():
    heredoc = RedirectFile("LIMITER", FileType.HEREDOC_FILE)
    assert heredoc.path == "LIMITER"
    assert heredoc.type is FileType.HEREDOC_FILE