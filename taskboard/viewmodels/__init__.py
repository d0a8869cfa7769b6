"""ViewModel package for UI state and command surfaces.

Call context:
    ``taskboard/app/main.py`` and ``taskboard/web_ui/main.py`` import the
    view models from this package and bind view callbacks to commands.

Dependencies:
    Modules in this package depend on domain types and use-case callables
    only. Storage adapters and widget toolkits remain outside.

Responsibilities:
    - Own the filter/sorter selection and transient UI flags.
    - Derive one immutable ``TaskUiState`` from the repository and the flags.
    - Turn use-case failures into user-facing error text.
"""
