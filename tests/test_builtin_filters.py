"""Behavioural tests for the Pillow/numpy filter implementations."""

import numpy as np
import pytest
from PIL import Image

from instafilter.core.filters import (
    FILTER_CHOICES,
    INPUT_IMAGE_KEY,
    available_filters,
    create_filter,
)
from instafilter.errors import FilterNotFoundError


def _render(identifier, image, **values):
    filter_ = create_filter(identifier)
    filter_.set_value(INPUT_IMAGE_KEY, image)
    for key, value in values.items():
        filter_.set_value(key, value)
    return filter_.output_image()


def test_menu_lists_seven_registered_filters():
    assert len(FILTER_CHOICES) == 7
    assert {choice.identifier for choice in FILTER_CHOICES} == set(available_filters())


def test_unknown_filter_raises():
    with pytest.raises(FilterNotFoundError):
        create_filter("CITwirlDistortion")


def test_unknown_input_is_rejected():
    filter_ = create_filter("CIGaussianBlur")
    with pytest.raises(ValueError):
        filter_.set_value("scale", 3)


def test_output_is_none_without_input_image():
    assert create_filter("CISepiaTone").output_image() is None


@pytest.mark.parametrize("identifier", available_filters())
def test_filters_preserve_size(identifier, gradient_image):
    result = _render(identifier, gradient_image)
    assert result is not None
    assert result.size == gradient_image.size


@pytest.mark.parametrize("identifier", available_filters())
def test_filters_preserve_alpha(identifier, gradient_image):
    rgba = gradient_image.convert("RGBA")
    rgba.putalpha(128)
    result = _render(identifier, rgba)
    assert result.mode == "RGBA"
    if identifier != "CIPixellate" and identifier != "CIGaussianBlur":
        assert np.all(np.asarray(result.getchannel("A")) == 128)


def test_sepia_with_zero_intensity_is_identity(gradient_image):
    result = _render("CISepiaTone", gradient_image, intensity=0.0)
    assert np.array_equal(np.asarray(result), np.asarray(gradient_image))


def test_sepia_full_intensity_changes_colours(gradient_image):
    result = _render("CISepiaTone", gradient_image, intensity=1.0)
    assert not np.array_equal(np.asarray(result), np.asarray(gradient_image))


def test_blur_with_zero_radius_is_identity(gradient_image):
    result = _render("CIGaussianBlur", gradient_image, radius=0.0)
    assert np.array_equal(np.asarray(result), np.asarray(gradient_image))


def test_pixellate_produces_uniform_blocks(gradient_image):
    result = np.asarray(_render("CIPixellate", gradient_image, scale=8.0))
    block = result[0:8, 8:16]
    assert np.all(block == block[0, 0])


def test_edges_of_flat_image_are_black():
    flat = Image.new("RGB", (20, 20), (120, 60, 30))
    result = np.asarray(_render("CIEdges", flat, intensity=0.5))
    assert np.all(result[1:-1, 1:-1] == 0)


def test_vignette_darkens_corners():
    flat = Image.new("RGB", (21, 21), (200, 200, 200))
    result = np.asarray(_render("CIVignette", flat, intensity=1.0, radius=0.0))
    assert result[10, 10, 0] == 200
    assert result[0, 0, 0] < result[10, 10, 0]


def test_vignette_without_intensity_is_identity(gradient_image):
    result = _render("CIVignette", gradient_image, intensity=0.0, radius=100.0)
    assert np.array_equal(np.asarray(result), np.asarray(gradient_image))


def test_crystallize_is_deterministic_and_reuses_source_colours(gradient_image):
    first = np.asarray(_render("CICrystallize", gradient_image, radius=8.0))
    second = np.asarray(_render("CICrystallize", gradient_image, radius=8.0))
    assert np.array_equal(first, second)

    source_colours = {tuple(px) for px in np.asarray(gradient_image).reshape(-1, 3)}
    result_colours = {tuple(px) for px in first.reshape(-1, 3)}
    assert result_colours <= source_colours
    assert len(result_colours) < len(source_colours)
