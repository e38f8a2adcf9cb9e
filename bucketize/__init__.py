"""Bucketize — slot numeric values into ordered, half-open buckets."""
from bucketize.bucketizer import Bucketizer
from bucketize.config import configure_logging, settings
from bucketize.models import Bucket, BucketDefinition

__all__ = ["Bucket", "BucketDefinition", "Bucketizer", "configure_logging", "settings"]
