from patternkit.prototype import File, Folder, main


def _tree():
    inner = Folder("folder 1")
    inner.insert(File("file 1"))
    outer = Folder("folder 2")
    outer.insert(inner)
    outer.insert(File("file 2"))
    return outer


def test_file_clone_is_independent():
    original = File("file 1")
    copy = original.clone()
    assert copy is not original
    assert copy.render() == original.render()


def test_folder_clone_is_deep():
    original = _tree()
    copy = original.clone()
    assert copy.render() == original.render()
    assert copy.children[0] is not original.children[0]
    assert copy.children[0].children[0] is not original.children[0].children[0]


def test_clone_unaffected_by_later_changes():
    original = _tree()
    copy = original.clone()
    original.insert(File("file 3"))
    assert len(copy.children) == 2
    assert len(original.children) == 3


def test_render_format():
    folder = Folder("folder 1")
    folder.insert(File("file 1"))
    assert folder.render() == "folder 1:\nfile 1\n"


def test_main_output(capsys):
    assert main() == 0
    assert capsys.readouterr().out == (
        "folder 2:\nfolder 1:\nfile 1\n\nfile 2\nfile 3\n"
    )