"""Demo employee directory written on first use of an empty store."""

DEMO_EMPLOYEES = [
    {
        "id": "1",
        "employeeId": "EMP-101",
        "fullName": "Priya Verma",
        "email": "priya.verma@aligna.io",
        "role": "ADMIN",
        "position": "HR Director",
        "department": "People Operations",
        "joinDate": "2021-11-05",
        "salary": 2400000,
        "phone": "+91 99887 76655",
        "address": "Vasant Vihar, New Delhi",
        "managerName": "Sidharth Shukla",
    },
    {
        "id": "2",
        "employeeId": "EMP-202",
        "fullName": "Rahul Sharma",
        "email": "rahul.sharma@aligna.io",
        "role": "EMPLOYEE",
        "position": "Lead Engineer",
        "department": "Software Engineering",
        "joinDate": "2022-08-12",
        "salary": 3200000,
        "phone": "+91 98765 43210",
        "address": "Indiranagar, Bangalore",
        "managerName": "Sidharth Shukla",
    },
    {
        "id": "3",
        "employeeId": "EMP-303",
        "fullName": "Amit Patel",
        "email": "amit.patel@aligna.io",
        "role": "EMPLOYEE",
        "position": "Senior UX Designer",
        "department": "Product Design",
        "joinDate": "2023-03-20",
        "salary": 1800000,
        "phone": "+91 91234 56789",
        "address": "Bandra West, Mumbai",
        "managerName": "Sidharth Shukla",
    },
    {
        "id": "4",
        "employeeId": "EMP-404",
        "fullName": "Neha Gupta",
        "email": "neha.gupta@aligna.io",
        "role": "EMPLOYEE",
        "position": "Senior Content Strategist",
        "department": "Marketing",
        "joinDate": "2023-06-15",
        "salary": 1200000,
        "phone": "+91 92233 44556",
        "address": "Saket, New Delhi",
        "managerName": "Sidharth Shukla",
    },
    {
        "id": "5",
        "employeeId": "EMP-505",
        "fullName": "Suresh Kumar",
        "email": "suresh.kumar@aligna.io",
        "role": "EMPLOYEE",
        "position": "Infrastructure Lead",
        "department": "IT Operations",
        "joinDate": "2022-01-10",
        "salary": 2800000,
        "phone": "+91 93344 55667",
        "address": "HSR Layout, Bangalore",
        "managerName": "Sidharth Shukla",
    },
    {
        "id": "6",
        "employeeId": "EMP-606",
        "fullName": "Anjali Mehta",
        "email": "anjali.mehta@aligna.io",
        "role": "EMPLOYEE",
        "position": "Product Manager",
        "department": "Product",
        "joinDate": "2023-09-01",
        "salary": 2200000,
        "phone": "+91 94455 66778",
        "address": "Powai, Mumbai",
        "managerName": "Sidharth Shukla",
    },
]

DEMO_EMPLOYEE_IDS = [e["employeeId"] for e in DEMO_EMPLOYEES]
