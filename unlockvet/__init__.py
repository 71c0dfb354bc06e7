"""unlock.vet benefit matching engine."""
