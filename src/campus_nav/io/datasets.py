# campus_nav/io/datasets.py
"""Bundled campus graphs, addressable from config as {"by": "name", "name": ...}."""

VIT_CHENNAI = {
    "crs": "geographic",
    "nodes": [
        {"id": "main_gate", "name": "Main Gate", "lat": 12.840440, "lng": 80.152999, "type": "entrance"},
        {"id": "admin", "name": "Admin Block", "lat": 12.841989, "lng": 80.157212, "type": "admin"},
        {"id": "reception", "name": "Reception", "lat": 12.843537, "lng": 80.151615, "type": "admin"},
        {"id": "ab1", "name": "Academic Block 1", "lat": 12.843294, "lng": 80.153573, "type": "academic"},
        {"id": "ab2", "name": "Academic Block 2", "lat": 12.840685, "lng": 80.154006, "type": "academic"},
        {"id": "ab3", "name": "Academic Block 3", "lat": 12.839507, "lng": 80.155204, "type": "academic"},
        {"id": "ab4", "name": "Academic Block 4", "lat": 12.843158, "lng": 80.154688, "type": "academic"},
        {"id": "ab5", "name": "Academic Block 5", "lat": 12.844667, "lng": 80.158219, "type": "academic"},
        {
            "id": "library",
            "name": "Central Library",
            "lat": 12.842928,
            "lng": 80.157714,
            "type": "academic",
            "facts": ["Open 8am to midnight during exams"],
        },
        {"id": "sigma", "name": "Sigma Block", "lat": 12.844578, "lng": 80.153872, "type": "academic"},
        {"id": "mg_auditorium", "name": "MG Auditorium", "lat": 12.841488, "lng": 80.156404, "type": "auditorium"},
        {"id": "gazebo", "name": "Gazebo", "lat": 12.843893, "lng": 80.154199, "type": "food"},
        {"id": "north_square", "name": "North Square Food Court", "lat": 12.841478, "lng": 80.154783, "type": "food"},
        {"id": "health_centre", "name": "Health Centre", "lat": 12.841100, "lng": 80.156060, "type": "emergency"},
        {"id": "gymkhana", "name": "Gymkhana", "lat": 12.840889, "lng": 80.153706, "type": "sports"},
        {"id": "guest_house", "name": "Guest House", "lat": 12.843741, "lng": 80.152263, "type": "services"},
        {"id": "vmart", "name": "VMart Supermarket", "lat": 12.844479, "lng": 80.153582, "type": "services"},
        {"id": "aavin", "name": "Aavin", "lat": 12.843790, "lng": 80.152727, "type": "food"},
        {"id": "a_hostel", "name": "A Block Hostel", "lat": 12.842423, "lng": 80.152510, "type": "hostel"},
        {"id": "b_hostel", "name": "B Block Hostel", "lat": 12.842919, "lng": 80.156242, "type": "hostel"},
        {"id": "c_hostel", "name": "C Block Hostel", "lat": 12.842500, "lng": 80.156000, "type": "hostel"},
        {
            "id": "ab1_robotics_lab",
            "name": "Robotics Lab",
            "lat": 12.843310,
            "lng": 80.153590,
            "type": "academic",
            "floor": "second floor",
            "parent": "ab1",
        },
        {
            "id": "library_reading_room",
            "name": "Reading Room",
            "lat": 12.842940,
            "lng": 80.157730,
            "type": "academic",
            "floor": "first floor",
            "parent": "library",
        },
        {"id": "j_gate", "name": "Gate Junction", "lat": 12.841200, "lng": 80.153400, "type": "junction"},
        {"id": "j_central", "name": "Central Junction", "lat": 12.842200, "lng": 80.155300, "type": "junction"},
        {"id": "j_east", "name": "East Junction", "lat": 12.842600, "lng": 80.157000, "type": "junction"},
    ],
    "edges": [
        {"from": "main_gate", "to": "j_gate", "segments": ["road_gate_to_admin"]},
        {"from": "main_gate", "to": "a_hostel", "segments": ["road_to_guest_house"]},
        {"from": "a_hostel", "to": "reception", "segments": ["road_hostel_west"]},
        {"from": "reception", "to": "guest_house", "segments": ["road_guest_house_lane"]},
        {"from": "guest_house", "to": "aavin", "segments": ["road_aavin"]},
        {"from": "aavin", "to": "ab1", "segments": ["road_aavin_to_ab1"]},
        {"from": "ab1", "to": "vmart", "segments": ["road_aavin_to_ab2"]},
        {"from": "vmart", "to": "sigma", "segments": ["road_sigma_lane"]},
        {"from": "ab1", "to": "gazebo", "segments": ["road_library_to_gazebo"]},
        {"from": "gazebo", "to": "ab4", "segments": ["road_gazebo_to_ab3"]},
        {"from": "ab4", "to": "j_central", "segments": ["road_ab3_curve"]},
        {"from": "j_gate", "to": "gymkhana", "segments": ["road_admin_to_library"]},
        {"from": "gymkhana", "to": "ab2", "segments": ["road_gym_lane"]},
        {"from": "ab2", "to": "north_square", "segments": ["road_ab3_to_north_square"]},
        {"from": "ab2", "to": "ab3", "segments": ["road_to_ab3"]},
        {"from": "north_square", "to": "j_central", "segments": ["road_central_junction"]},
        {"from": "north_square", "to": "mg_auditorium", "segments": ["road_to_health_centre"]},
        {"from": "mg_auditorium", "to": "health_centre", "segments": ["road_health_to_bblock"]},
        {"from": "health_centre", "to": "ab3", "segments": ["road_ab3_east"]},
        {"from": "j_central", "to": "c_hostel", "segments": ["road_central_east"]},
        {"from": "c_hostel", "to": "b_hostel", "segments": ["road_bblock_to_cblock"]},
        {"from": "b_hostel", "to": "j_east", "segments": ["road_east_diagonal"]},
        {"from": "j_east", "to": "library", "segments": ["road_library_junction_east"]},
        {"from": "j_east", "to": "admin", "segments": ["road_admin_drive"]},
        {"from": "library", "to": "ab5", "segments": ["road_to_ab5"]},
        {"from": "sigma", "to": "ab5", "segments": ["road_north_perimeter", "road_ab5_gate"]},
        {"from": "ab1_robotics_lab", "to": "ab1", "segments": ["corridor_ab1_lab"]},
        {"from": "library_reading_room", "to": "library", "segments": ["corridor_library_stairs"]},
    ],
}

# Planar (SVG pixel) layout with explicit weights
DEMO_GRID = {
    "crs": "planar",
    "nodes": [
        {"id": "A", "name": "North Gate", "x": 0.0, "y": 0.0, "type": "landmark"},
        {"id": "B", "name": "Lecture Hall", "x": 3.0, "y": 0.0, "type": "academic"},
        {"id": "C", "name": "Canteen", "x": 3.0, "y": 4.0, "type": "food"},
        {"id": "D", "name": "Clinic", "x": 0.0, "y": 4.0, "type": "emergency"},
        {"id": "J", "name": "Crossing", "x": 1.5, "y": 2.0, "type": "junction"},
    ],
    "edges": [
        {"from": "A", "to": "B", "weight": 3.0, "segments": ["path_ab"]},
        {"from": "B", "to": "C", "weight": 4.0, "segments": ["path_bc"]},
        {"from": "A", "to": "J", "weight": 5.0, "segments": ["path_aj"]},
        {"from": "J", "to": "C", "weight": 5.0, "segments": ["path_jc"]},
        {"from": "C", "to": "D", "weight": 3.0, "segments": ["path_cd_1", "path_cd_2"]},
    ],
}

DATASETS = {
    "vit_chennai": VIT_CHENNAI,
    "demo_grid": DEMO_GRID,
}
