"""
onnx-embed :: Models

User-supplied model descriptors.
"""

from onnx_embed.models.user_defined import UserDefinedEmbeddingModel
