class SchemaOps:
    """operator shorthands that compose whole builders into combinators.

    every operator returns a new builder whose root is the combinator; the
    operands are embedded as independent subschemas.
    """

    def __and__(self, *object):
        return self.fresh().allOf((self,) + object)

    def __or__(self, *object):
        return self.fresh().anyOf((self,) + object)

    def __xor__(self, *object):
        return self.fresh().oneOf((self,) + object)

    def __neg__(self):
        return self.fresh().not_(self)

    def __pos__(self):
        return self

    def __rshift__(self, object):
        """a >> b reads as: if a then b"""
        return self.fresh().ifThen(self, object)
