"""Order placement: validation and orchestration of retail orders."""
