"""Seed color extraction from an image."""

import numpy as np
from PIL import Image
from sklearn.cluster import KMeans

from .color import rgb_to_hex
from .oklch import to_oklch

# Dominant clusters below this chroma are treated as grey
MIN_SEED_CHROMA = 0.03


def _load_pixels(image_path, size):
    img = Image.open(image_path).convert("RGB")
    img.thumbnail((size, size))
    return np.array(img).reshape(-1, 3)


def extract_colors(image_path, n_colors=8):
    """Extract dominant colors using k-means clustering

    Returns:
        list of (hex, share) tuples, share being the fraction of pixels in the cluster
    """
    pixels = _load_pixels(image_path, 300)

    # Remove extreme pixels
    mask = (pixels.sum(axis=1) > 30) & (pixels.sum(axis=1) < 735)
    filtered_pixels = pixels[mask]

    if len(filtered_pixels) < n_colors:
        filtered_pixels = pixels

    n_clusters = min(n_colors, len(np.unique(filtered_pixels, axis=0)))
    kmeans = KMeans(n_clusters=n_clusters, random_state=42, n_init=10)
    labels = kmeans.fit_predict(filtered_pixels)
    counts = np.bincount(labels, minlength=n_clusters)

    colors = []
    for center, count in zip(kmeans.cluster_centers_, counts):
        r, g, b = (int(round(c)) for c in center)
        colors.append((rgb_to_hex(r, g, b), count / len(labels)))

    return sorted(colors, key=lambda item: item[1], reverse=True)


def find_average_color(image_path):
    """Get overall average color of image"""
    pixels = _load_pixels(image_path, 100)
    avg = pixels.mean(axis=0)
    return rgb_to_hex(*avg)


def extract_seed_color(image_path, n_colors=8):
    """Pick a seed color for generation from an image.

    Prefers the cluster with the largest chroma weighted by its pixel share,
    and falls back to the image's average color when every cluster is grey.
    """
    best_hex = None
    best_weight = 0.0
    for hex_color, share in extract_colors(image_path, n_colors=n_colors):
        chroma = to_oklch(hex_color).C
        if chroma < MIN_SEED_CHROMA:
            continue
        weight = chroma * share
        if weight > best_weight:
            best_weight = weight
            best_hex = hex_color

    return best_hex or find_average_color(image_path)
