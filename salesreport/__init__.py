"""Sales activity reporting: validate, filter, render and upload sales reports."""
