# static data

# Eastern districts exist below but the region list has never included them.
REGIONS = ["Western", "Northern", "North West", "Southern"]

districts_data = [
    {"name": "Western Area Urban (Freetown)", "region": "Western", "coordinates": "8.484, -13.229"},
    {"name": "Western Area Rural", "region": "Western", "coordinates": "8.333, -13.035"},
    {"name": "Port Loko", "region": "North West", "coordinates": "8.766, -12.787"},
    {"name": "Bombali", "region": "Northern", "coordinates": "9.276, -12.058"},
    {"name": "Kambia", "region": "North West", "coordinates": "9.125, -12.918"},
    {"name": "Karene", "region": "Northern", "coordinates": "9.050, -12.450"},
    {"name": "Tonkolili", "region": "Northern", "coordinates": "8.683, -11.667"},
    {"name": "Koinadugu", "region": "Northern", "coordinates": "9.500, -11.417"},
    {"name": "Falaba", "region": "Northern", "coordinates": "9.750, -11.250"},
    {"name": "Bo", "region": "Southern", "coordinates": "7.964, -11.739"},
    {"name": "Moyamba", "region": "Southern", "coordinates": "8.158, -12.431"},
    {"name": "Bonthe", "region": "Southern", "coordinates": "7.526, -12.505"},
    {"name": "Pujehun", "region": "Southern", "coordinates": "7.350, -11.717"},
    {"name": "Kenema", "region": "Eastern", "coordinates": "7.876, -11.190"},
    {"name": "Kailahun", "region": "Eastern", "coordinates": "8.279, -10.573"},
    {"name": "Kono", "region": "Eastern", "coordinates": "8.646, -10.971"},
]

users_data = [
    {"email": "admin@slyouthjobs.com", "password": "admin123", "name": "Admin User", "role": "admin",
     "district": "Western Area Urban (Freetown)", "skills": ["Management", "Administration"]},
    {"email": "employer@techsl.com", "password": "employer123", "name": "Tech Sierra Leone", "role": "employer",
     "district": "Western Area Urban (Freetown)", "skills": []},
    {"email": "jobseeker@example.com", "password": "user123", "name": "John Doe", "role": "jobseeker",
     "district": "Bo", "skills": ["JavaScript", "HTML", "CSS", "Communication"]},
]

# "employer_email" is resolved to the seeded employer's id at load time
jobs_data = [
    {
        "title": "Junior Software Developer",
        "company": "Tech Sierra Leone",
        "location": "Freetown",
        "district": "Western Area Urban (Freetown)",
        "type": "Full-time",
        "experience": "Entry Level",
        "salary": "SLL 800,000 - 1,200,000",
        "category": "technology",
        "description": "We're looking for a passionate junior developer to join our growing team. "
                       "Knowledge of JavaScript and web development required.",
        "requirements": "Bachelor's degree in Computer Science or related field, Knowledge of JavaScript, HTML, CSS",
        "employer_email": "employer@techsl.com",
    },
    {
        "title": "Community Health Worker",
        "company": "Health for All SL",
        "location": "Bo",
        "district": "Bo",
        "type": "Full-time",
        "experience": "Entry Level",
        "salary": "SLL 600,000 - 900,000",
        "category": "healthcare",
        "description": "Join our community health initiative to provide basic healthcare services in rural areas. "
                       "Training will be provided.",
        "requirements": "High school diploma, Good communication skills, Willingness to work in rural areas",
        "employer_email": "employer@techsl.com",
    },
]
