__all__ = ["typename"]

def typename(obj, qualified = False):
    """Return the name of an object's class (or of obj itself, if a class).

    :param bool qualified:
        Include the module path and any enclosing class names.
    """
    cls = obj if isinstance(obj, type) else type(obj)

    if qualified:
        return ".".join((cls.__module__, cls.__qualname__))
    else:
        return cls.__name__
