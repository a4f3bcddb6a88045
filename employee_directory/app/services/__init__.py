"""
Service layer for the facade.

``EmployeeService`` holds the business logic, ``EmployeeStoreClient``
the HTTP calls to the employee store and ``EmployeeDeletion`` the
delete-by-id protocol.
"""
