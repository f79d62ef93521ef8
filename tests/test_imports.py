"""
Import tests for all PyFastResize modules and submodules.

These tests ensure that all modules can be imported without errors,
which is crucial for detecting import-related issues early.
"""
import pytest


class TestMainPackageImports:
    """Test imports for the main pyfastresize package."""

    @pytest.mark.importtest
    def test_main_package_import(self):
        """Test that the main pyfastresize package can be imported."""
        import pyfastresize
        assert hasattr(pyfastresize, "__version__")
        assert hasattr(pyfastresize, "__all__")

    @pytest.mark.importtest
    def test_constants_import(self):
        """Test that constants module can be imported."""
        import pyfastresize.constants
        assert pyfastresize.constants.DEFAULT_KERNEL == "lanczos"
        assert pyfastresize.constants.DEFAULT_JPEG_QUALITY == 80

    @pytest.mark.importtest
    def test_errors_import(self):
        """Test that the error taxonomy is importable."""
        from pyfastresize.errors import (
            ConflictingScaleModes,
            DegenerateOutputSize,
            UnknownKernel,
            ConfigError,
            ResizeError,
        )
        assert issubclass(ConflictingScaleModes, ConfigError)
        assert issubclass(DegenerateOutputSize, ValueError)
        assert issubclass(UnknownKernel, ResizeError)


class TestRastermanipImports:
    """Test imports for the rastermanip package."""

    @pytest.mark.importtest
    def test_rastermanip_init_import(self):
        """Test rastermanip package import and public API."""
        import pyfastresize.rastermanip as rm
        for name in ("RasterImage", "resolve_dimensions", "resize", "get_kernel"):
            assert hasattr(rm, name)

    @pytest.mark.importtest
    def test_unknown_lazy_attribute(self):
        """Unknown attributes raise AttributeError, not ImportError."""
        import pyfastresize.rastermanip as rm
        with pytest.raises(AttributeError):
            rm.does_not_exist


class TestIOImports:
    """Test imports for the io and misc packages."""

    @pytest.mark.importtest
    def test_io_import(self):
        import pyfastresize.io
        assert hasattr(pyfastresize.io, "load_image")
        assert hasattr(pyfastresize.io, "save_image")

    @pytest.mark.importtest
    def test_misc_import(self):
        import pyfastresize.misc
        assert hasattr(pyfastresize.misc, "resize_image_file")


class TestCLIImports:
    """Test imports for CLI modules."""

    @pytest.mark.importtest
    def test_cli_init_import(self):
        """Test CLI package import."""
        import pyfastresize.cli
        assert pyfastresize.cli is not None

    @pytest.mark.importtest
    def test_cli_resize_commands_import(self):
        """Test resize commands module import."""
        import pyfastresize.cli.resize_commands
        assert hasattr(pyfastresize.cli.resize_commands, "image_resize")

    @pytest.mark.importtest
    def test_cli_lazy_attribute(self):
        """CLI commands are reachable from the package namespace."""
        import pyfastresize.cli
        assert callable(pyfastresize.cli.image_resize)
