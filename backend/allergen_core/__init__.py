"""
Allergen deduction: parse food labels, narrow candidate ingredients per allergen,
and resolve each allergen to the one ingredient that carries it.
"""
