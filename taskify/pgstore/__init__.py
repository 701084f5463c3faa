"""PostgreSQL task storage: the task SQL queries and a TaskStore built on them."""