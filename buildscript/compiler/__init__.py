from .compiler import BuildCompiler, compile_manifest, compile_to_script, split_env

__all__ = ['BuildCompiler', 'compile_manifest', 'compile_to_script', 'split_env']
