"""Store admin resource form: MVVM controller over a REST resource collection."""
