"""
onnx-embed :: Engine

Runtime assembly: configuration in, TextEmbedding out.
"""

from onnx_embed.engine.text_embedding import TextEmbedding
