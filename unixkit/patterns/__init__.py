"""Short demonstrations of creational, structural and behavioural design patterns."""