"""ViewModel package for UI state and command surfaces.

Call context:
    ``storeadmin.app`` controllers and ``storeadmin.web_ui`` pages import the
    viewmodels from this package to bind view callbacks to state transitions.

Dependencies:
    Modules in this package depend on domain types only. I/O adapters and
    use-case orchestration remain outside.
"""
