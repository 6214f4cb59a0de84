"""State/store layer.

Normalized collections, the action vocabulary, slice reducers and the
store that threads them together. Everything here is synchronous and pure
except :class:`~pyroster.state.store.Store` itself.
"""
