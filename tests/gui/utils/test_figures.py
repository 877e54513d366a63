"""Tests for figure loading."""

from PIL import Image

from quiz_runner.gui.utils.figures import FigureProvider, to_qpixmap


class TestFigureProvider:
    
    def test_get_when_no_reference_then_none(self, tmp_path):
        assert FigureProvider(tmp_path).get(None) is None
    
    def test_get_resolves_relative_to_base_dir(self, sample_image):
        provider = FigureProvider(sample_image.parent)
        image = provider.get("sample.png")
        assert image is not None
        assert image.mode == "RGBA"
        assert image.size == (200, 100)
    
    def test_get_caches_images(self, sample_image):
        provider = FigureProvider(sample_image.parent)
        assert provider.get("sample.png") is provider.get("sample.png")
    
    def test_large_images_are_thumbnailed(self, tmp_path):
        Image.new("RGB", (1600, 600)).save(tmp_path / "big.png")
        image = FigureProvider(tmp_path, max_size=(800, 600)).get("big.png")
        assert image.size == (800, 300)
    
    def test_missing_figure_returns_none(self, tmp_path, caplog):
        assert FigureProvider(tmp_path).get("missing.png") is None
        assert "Figure not found" in caplog.text
    
    def test_unreadable_figure_returns_none(self, tmp_path):
        (tmp_path / "broken.png").write_bytes(b"not an image")
        assert FigureProvider(tmp_path).get("broken.png") is None
    
    def test_absolute_reference_ignores_base_dir(self, sample_image, tmp_path):
        provider = FigureProvider(tmp_path / "elsewhere")
        assert provider.resolve(str(sample_image)) == sample_image


def test_to_qpixmap_keeps_size(qtbot, sample_image):
    image = FigureProvider(sample_image.parent).get("sample.png")
    pixmap = to_qpixmap(image)
    assert pixmap.width() == 200
    assert pixmap.height() == 100
