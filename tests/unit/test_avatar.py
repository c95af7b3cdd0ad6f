import sys
import tempfile
import unittest
from pathlib import Path

from PIL import Image

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from monogram_core.cache import MemoryCacheStore
from monogram_core.config import AvatarConfig, BorderConfig
from monogram_core.errors import InvalidInput, ResourceUnavailable, UnsupportedShape
from monogram_renderer.avatar import AvatarFactory, get_initials

CONFIG = AvatarConfig(
    backgrounds=("#ff0000", "#00ff00", "#0000ff"),
    foregrounds=("#ffffff",),
    fonts=("missing.ttf",),
    font_size=32,
    border=BorderConfig(size=2, color="background"),
)


class _CountingStore:
    def __init__(self):
        self.entries = {}
        self.computed = 0

    def remember_forever(self, key, compute):
        if key not in self.entries:
            self.computed += 1
            self.entries[key] = compute()
        return self.entries[key]


class AvatarTests(unittest.TestCase):
    def setUp(self):
        self.store = _CountingStore()
        self.factory = AvatarFactory(CONFIG, cache=self.store)

    def test_setters_chain_on_same_object(self):
        avatar = self.factory.create("John Doe")
        returned = (
            avatar.set_background("#000000")
            .set_foreground("#eeeeee")
            .set_dimension(64)
            .set_font_size(20)
            .set_border(3, "#123456")
            .set_shape("square")
            .set_chars(1)
        )
        self.assertIs(returned, avatar)

        resolved = avatar.resolve()
        self.assertEqual(resolved.initials, "J")
        self.assertEqual(resolved.background, "#000000")
        self.assertEqual(resolved.foreground, "#eeeeee")
        self.assertEqual((resolved.width, resolved.height), (64, 64))
        self.assertEqual(resolved.font_size, 20)
        self.assertEqual((resolved.border_size, resolved.border_color), (3, "#123456"))
        self.assertEqual(resolved.shape, "square")

    def test_set_dimension_with_height(self):
        image = self.factory.create("John Doe").set_dimension(80, 40).render()
        self.assertEqual(image.size, (80, 40))

    def test_setters_do_not_touch_shared_config(self):
        self.factory.create("John Doe").set_dimension(10).set_shape("square")
        self.assertEqual(self.factory.config.width, 100)
        self.assertEqual(self.factory.config.shape, "circle")

    def test_border_follows_background_override(self):
        avatar = self.factory.create("John Doe").set_background("#010101")
        self.assertEqual(avatar.resolve().border_color, "#010101")

    def test_invalid_name_rejected_on_create(self):
        with self.assertRaises(InvalidInput):
            self.factory.create({"first": "John"})

    def test_unsupported_shape_on_render(self):
        avatar = self.factory.create("John Doe").set_shape("hexagon")
        with self.assertRaises(UnsupportedShape):
            avatar.render()
        with self.assertRaises(UnsupportedShape):
            avatar.to_png()
        self.assertEqual(self.store.entries, {})

    def test_png_computed_once(self):
        first = self.factory.create("John Doe").to_png()
        second = self.factory.create("John Doe").to_png()
        self.assertEqual(first, second)
        self.assertEqual(self.store.computed, 1)

    def test_quality_only_applies_to_first_encoding(self):
        first = self.factory.create("John Doe").to_png(quality=100)
        second = self.factory.create("John Doe").to_png(quality=0)
        self.assertEqual(second, first)
        self.assertEqual(self.store.computed, 1)

    def test_cache_key_tracks_overrides(self):
        plain = self.factory.create("John Doe")
        tinted = self.factory.create("John Doe").set_background("#000000")
        self.assertNotEqual(plain.cache_key, tinted.cache_key)
        self.assertEqual(plain.cache_key, self.factory.create("John Doe").cache_key)

    def test_data_url(self):
        url = self.factory.create("John Doe").to_data_url()
        self.assertTrue(url.startswith("data:image/png;base64,"))

    def test_save(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = self.factory.create("John Doe").save(Path(tmp) / "nested" / "jd.png")
            self.assertTrue(path.exists())
            with Image.open(path) as image:
                self.assertEqual(image.size, (100, 100))

    def test_initials_helpers(self):
        self.assertEqual(get_initials("John Doe"), "JD")
        self.assertEqual(get_initials("Cher", 3), "CHE")
        self.assertEqual(self.factory.get_initials("ada lovelace byron"), "AL")
        self.assertEqual(self.factory.create("  multiple   spaces  ").initials, "MS")


class CachedPathTests(unittest.TestCase):
    def test_cached_path_layout(self):
        with tempfile.TemporaryDirectory() as tmp:
            cache_dir = Path(tmp) / "avatars"
            factory = AvatarFactory(AvatarConfig(fonts=("missing.ttf",), cache_dir=cache_dir))
            self.assertTrue(cache_dir.is_dir())

            avatar = factory.create("John Doe")
            path = avatar.cached_path()
            self.assertEqual(path, cache_dir / f"{avatar.cache_key}.png")
            self.assertTrue(path.exists())

            mtime = path.stat().st_mtime_ns
            self.assertEqual(factory.create("John Doe").cached_path(), path)
            self.assertEqual(path.stat().st_mtime_ns, mtime)
            self.assertEqual(factory.create("John Doe").cached_path(quality=0), path)
            self.assertEqual(path.stat().st_mtime_ns, mtime)
            self.assertEqual(sorted(p.name for p in cache_dir.iterdir()), [path.name])

    def test_cached_path_requires_cache_dir(self):
        factory = AvatarFactory(AvatarConfig(fonts=("missing.ttf",)), cache=MemoryCacheStore())
        with self.assertRaises(ResourceUnavailable):
            factory.create("John Doe").cached_path()

    def test_cache_dir_blocked_by_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            blocker = Path(tmp) / "file"
            blocker.write_text("x", encoding="utf-8")
            with self.assertRaises(ResourceUnavailable):
                AvatarFactory(AvatarConfig(cache_dir=blocker))


if __name__ == "__main__":
    unittest.main()
