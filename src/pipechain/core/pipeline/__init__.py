# src/pipechain/core/pipeline/__init__.py
"""
Contratos e estruturas fundamentais do pipechain.

- **outcome**: `Outcome`, `Success`, `Failure`
- **pipe**: protocolo `Pipe`, `BasePipe`, `FunctionPipe`, `pipe()`
- **typetags**: `same_type`, `is_assignable`, `type_name`
- **logger**: protocolo `PipelineLogger`, `EventLogger`, logging stdlib
- **types**: `StepStatus`, `StepRecord` (trace de execução)

Nada aqui executa cadeias; isso é responsabilidade de `core.engine`.
"""
