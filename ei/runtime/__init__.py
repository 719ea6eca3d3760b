"""Runtime values, native callables and the tree-walking interpreter."""
