def test_import_tadv_package() -> None:
    import importlib

    module = importlib.import_module("tadv")
    assert module.__version__


def test_import_cli_app_no_side_effects(capsys) -> None:
    from tadv.presentation.cli import app

    assert callable(app.main)
    assert capsys.readouterr().out == ""
