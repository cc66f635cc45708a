"""Slug, locale, translation and SEO helpers."""
