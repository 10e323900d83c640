"""Exchange insider trading tracker - Shenzhen and Shanghai director/officer trades."""
