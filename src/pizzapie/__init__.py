"""PizzaPie: pizza orders, the kitchen and delivery drivers."""
