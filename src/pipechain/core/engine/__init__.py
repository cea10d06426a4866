# src/pipechain/core/engine/__init__.py
"""
Engine do pipechain.

    - chain    → PipelineSource e ChainStep (append, tap, tap_error)
    - pipeline → Pipeline (configure, run) e gate de validação de tipo

Execução síncrona, um pipe por vez, na ordem de declaração.
"""
