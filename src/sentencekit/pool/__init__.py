"""Resource pool adapters for provider instances."""

from sentencekit.pool.adapter import Resource, ResourceFactory, ResourceWrapper

__all__ = ["Resource", "ResourceFactory", "ResourceWrapper"]
