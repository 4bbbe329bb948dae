"""Gopher rendering through gopherize.me."""
