"""
onnx-embed :: CLI

Usage:
    onnx-embed list [--family text|sparse|rerank]
    onnx-embed check <model_dir> [--model CODE | --onnx PATH]
                     [--max-length N] [--provider NAME ...]
                     [--pooling cls|mean] [--quantization none|static|dynamic]

check assembles a TextEmbedding from a local directory and prints what
was resolved. With --model the catalog entry supplies the ONNX path and
defaults; with --onnx the model is treated as user-defined.

INL - 2025
"""

import argparse
import sys


def cmd_list(args):
    """List catalog models."""
    from onnx_embed.core.registry import get_family, list_models

    family = get_family(args.family) if args.family else None
    models = list_models(family)
    if not models:
        print("No models registered.")
        return

    print(f"{'Name':<36} {'Family':<8} {'Dim':>5} {'Description'}")
    print("-" * 80)
    for m in models:
        dim = str(m.dim) if m.dim is not None else "-"
        print(f"{m.model_code:<36} {m.family.NAME:<8} {dim:>5} {m.description}")


def _build_embedding(args):
    from onnx_embed.core.options import InitOptionsUserDefined, TextInitOptions
    from onnx_embed.core.pooling import Pooling
    from onnx_embed.core.quantization import QuantizationMode
    from onnx_embed.core.tokenizer import TokenizerFiles
    from onnx_embed.engine.text_embedding import TextEmbedding
    from onnx_embed.models.user_defined import UserDefinedEmbeddingModel

    if args.onnx:
        options = InitOptionsUserDefined.new()
        if args.max_length is not None:
            options = options.with_max_length(args.max_length)
        if args.provider:
            options = options.with_execution_providers(args.provider)

        model = UserDefinedEmbeddingModel.new(args.onnx, TokenizerFiles.from_directory(args.model_dir))
        if args.pooling:
            model = model.with_pooling(Pooling.parse(args.pooling))
        if args.quantization:
            model = model.with_quantization(QuantizationMode.parse(args.quantization))
        return TextEmbedding.try_new_from_user_defined(model, options)

    options = TextInitOptions.new(args.model)
    if args.max_length is not None:
        options = options.with_max_length(args.max_length)
    if args.provider:
        options = options.with_execution_providers(args.provider)
    return TextEmbedding.try_new(options, args.model_dir)


def cmd_check(args):
    """Assemble a model and print the resolved configuration."""
    from onnx_embed.core.logging import setup_logging

    logger = setup_logging(level=args.log_level, json_output=args.json_logs)

    try:
        embedding = _build_embedding(args)
    except (ValueError, FileNotFoundError, RuntimeError) as exc:
        logger.error(f"check failed: {exc}")
        sys.exit(1)

    inputs = [i.name for i in embedding.session.get_inputs()]
    print(f"Inputs:          {', '.join(inputs)}")
    print(f"Output:          {embedding.output_name()}")
    print(f"Token type ids:  {'required' if embedding.need_token_type_ids else 'not used'}")
    print(f"Pooling:         {embedding.pooling.value if embedding.pooling else 'default'}")
    print(f"Quantization:    {embedding.quantization.value}")
    print(f"Providers:       {', '.join(embedding.session.get_providers())}")


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="onnx-embed",
        description="Resolve and check ONNX embedding models",
    )
    sub = parser.add_subparsers(dest="command")

    # list
    p_list = sub.add_parser("list", help="List catalog models")
    p_list.add_argument("--family", default=None, choices=["text", "sparse", "rerank"])
    p_list.set_defaults(func=cmd_list)

    # check
    p_check = sub.add_parser("check", help="Assemble a model from a local directory")
    p_check.add_argument("model_dir", help="Directory holding tokenizer files (and catalog ONNX file)")
    src = p_check.add_mutually_exclusive_group()
    src.add_argument("--model", default=None, help="Catalog model name (default: family default)")
    src.add_argument("--onnx", default=None, help="Path to a user-defined ONNX file")
    p_check.add_argument("--max-length", type=int, default=None)
    p_check.add_argument("--provider", action="append", default=[],
                         help="Execution provider, repeat in priority order")
    p_check.add_argument("--pooling", default=None, choices=["cls", "mean"],
                         help="Pooling override (user-defined models only)")
    p_check.add_argument("--quantization", default=None, choices=["none", "static", "dynamic"],
                         help="Quantization mode (user-defined models only)")
    p_check.add_argument("--log-level", default="INFO")
    p_check.add_argument("--json-logs", action="store_true", help="Emit logs as JSON")
    p_check.set_defaults(func=cmd_check)

    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        sys.exit(1)

    # Catalog models take pooling and quantization from their catalog entry
    if args.command == "check" and not args.onnx and (args.pooling or args.quantization):
        parser.error("--pooling and --quantization require --onnx")

    args.func(args)


if __name__ == "__main__":
    main()
