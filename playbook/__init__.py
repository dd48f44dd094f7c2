"""Playbook - American football play designer."""

__version__ = "0.1.0"
