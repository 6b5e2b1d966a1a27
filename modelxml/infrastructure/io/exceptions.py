class ModelXMLError(Exception):
    pass


class UnknownTypeError(ModelXMLError):
    pass


class UnknownPackageError(UnknownTypeError):
    pass


class UnresolvedTypeError(ModelXMLError):
    pass


class UnresolvedReferenceError(ModelXMLError):
    pass


class NamespaceConflictError(ModelXMLError):
    pass


class UnknownNamespaceError(ModelXMLError):
    pass


class CyclicContainmentError(ModelXMLError):
    pass


class AttributeConflictError(ModelXMLError):
    pass
