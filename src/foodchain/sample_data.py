"""Built-in sample scenario: five product journeys across Nigerian supply chains.

Each journey ends in a payment request. Tomato, garlic and tilapia pick up
condition violations on the way (garlic twice, in transit and at the Ibadan
dry store); onion and plantain stay within range through every leg, including
the second transport after processing.
"""

SAMPLE_EVENTS: list[dict] = [
    # Tomato: hot afternoon transport to Abuja breaches the temperature range
    {
        "eventType": "HARVEST",
        "actorId": "farmer_001",
        "productId": "TOMATO_BATCH_001",
        "location": "Kano Farm Plot A",
        "details": {
            "cropType": "Tomato",
            "plantingDate": "2025-01-15",
            "harvestDate": "2025-05-20",
            "quantityKg": 500,
            "initialQuality": "Good",
        },
    },
    {
        "eventType": "TRANSPORT",
        "actorId": "logistics_NGR_001",
        "productId": "TOMATO_BATCH_001",
        "location": "En route to Lagos Warehouse",
        "details": {
            "vehicleId": "TRUCK_A123",
            "departureTime": "2025-05-20T10:00:00Z",
            "arrivalTime": "2025-05-21T08:00:00Z",
            "delayHours": 2,
            "delayReason": "Heavy morning traffic in Ogun",
            "weatherCondition": "Mild rain showers",
            "currentTempCelsius": 22,
            "currentHumidityPercent": 70,
            "estimatedSpoilagePercent": 6,
            "thresholds": {"minTemp": 18, "maxTemp": 25, "minHumidity": 60, "maxHumidity": 80},
        },
    },
    {
        "eventType": "WAREHOUSE_RECEIPT",
        "actorId": "warehouse_Lagos_001",
        "productId": "TOMATO_BATCH_001",
        "location": "Lagos Central Warehouse",
        "details": {
            "receiptTime": "2025-05-21T08:30:00Z",
            "storageSection": "Refrigerated Unit 5",
            "currentTempCelsius": 20,
            "currentHumidityPercent": 65,
            "weatherCondition": "Stable with moderate cloud cover",
            "estimatedSpoilagePercent": 5,
            "thresholds": {"minTemp": 18, "maxTemp": 22, "minHumidity": 60, "maxHumidity": 75},
        },
    },
    {
        "eventType": "PROCESS",
        "actorId": "processor_NGR_001",
        "productId": "TOMATO_BATCH_001",
        "location": "Lagos Processing Plant",
        "details": {
            "processingDate": "2025-05-22",
            "processedInto": "Tomato Paste Jar 250g",
            "batchNo": "TPJ-20250522-001",
            "qualityControl": "Passed",
            "quantityKg": 450,
        },
    },
    {
        "eventType": "TRANSPORT",
        "actorId": "logistics_NGR_002",
        "productId": "TOMATO_BATCH_001",
        "location": "En route to Abuja Retailer",
        "details": {
            "vehicleId": "VAN_B456",
            "departureTime": "2025-05-23T09:00:00Z",
            "arrivalTime": "2025-05-24T18:00:00Z",
            "delayHours": 3,
            "delayReason": "Flat tire and rerouting",
            "weatherCondition": "Hot afternoon sun",
            "currentTempCelsius": 30,
            "currentHumidityPercent": 50,
            "estimatedSpoilagePercent": 10,
            "thresholds": {"minTemp": 20, "maxTemp": 28, "minHumidity": 40, "maxHumidity": 60},
        },
    },
    {
        "eventType": "RETAIL_RECEIPT",
        "actorId": "retailer_Abuja_001",
        "productId": "TOMATO_BATCH_001",
        "location": "Abuja SuperMart",
        "details": {
            "receiptTime": "2025-05-24T18:30:00Z",
            "displayConditions": "Shelf",
            "currentTempCelsius": 25,
            "currentHumidityPercent": 55,
            "weatherCondition": "Indoor AC with ambient humidity",
            "estimatedSpoilagePercent": 3,
            "thresholds": {"minTemp": 20, "maxTemp": 30, "minHumidity": 40, "maxHumidity": 60},
        },
    },
    {
        "eventType": "PAYMENT_REQUEST",
        "actorId": "farmer_001",
        "productId": "TOMATO_BATCH_001",
        "location": "Kano Farm Office",
        "details": {
            "buyerId": "processor_NGR_001",
            "quantityKg": 500,
            "agreedPricePerKg": 350,
            "qualityVerified": True,
            "deliveryConfirmed": True,
            "spoilageRate": 0.15,
        },
    },
    # Onion: all readings within range, full payment
    {
        "eventType": "HARVEST",
        "actorId": "farmer_002",
        "productId": "ONION_BATCH_002",
        "location": "Kaduna Farm Block B",
        "details": {
            "cropType": "Onion",
            "plantingDate": "2025-02-10",
            "harvestDate": "2025-06-15",
            "quantityKg": 300,
            "initialQuality": "Very Good",
        },
    },
    {
        "eventType": "TRANSPORT",
        "actorId": "logistics_NGR_003",
        "productId": "ONION_BATCH_002",
        "location": "En route to Enugu Warehouse",
        "details": {
            "vehicleId": "TRUCK_X789",
            "departureTime": "2025-06-15T11:00:00Z",
            "arrivalTime": "2025-06-16T14:00:00Z",
            "delayHours": 4,
            "delayReason": "Broken axle on expressway",
            "weatherCondition": "Dry heat with dust winds",
            "currentTempCelsius": 24,
            "currentHumidityPercent": 72,
            "estimatedSpoilagePercent": 10,
            "thresholds": {"minTemp": 20, "maxTemp": 26, "minHumidity": 60, "maxHumidity": 80},
        },
    },
    {
        "eventType": "WAREHOUSE_RECEIPT",
        "actorId": "warehouse_Enugu_002",
        "productId": "ONION_BATCH_002",
        "location": "Enugu Agro Warehouse",
        "details": {
            "receiptTime": "2025-06-16T15:00:00Z",
            "storageSection": "Ventilated Zone 2",
            "currentTempCelsius": 22,
            "currentHumidityPercent": 72,
            "weatherCondition": "Cloudy and dry",
            "estimatedSpoilagePercent": 12,
            "thresholds": {"minTemp": 20, "maxTemp": 25, "minHumidity": 60, "maxHumidity": 75},
        },
    },
    {
        "eventType": "PROCESS",
        "actorId": "processor_NGR_003",
        "productId": "ONION_BATCH_002",
        "location": "Enugu Processing Center",
        "details": {
            "processingDate": "2025-06-17",
            "processedInto": "Dried Onion Flakes 100g",
            "batchNo": "DOF-20250617-002",
            "qualityControl": "Passed",
            "quantityKg": 270,
        },
    },
    {
        "eventType": "TRANSPORT",
        "actorId": "logistics_NGR_004",
        "productId": "ONION_BATCH_002",
        "location": "En route to Enugu Market Stall 9",
        "details": {
            "vehicleId": "VAN_Y908",
            "departureTime": "2025-05-23T09:00:00Z",
            "arrivalTime": "2025-05-24T18:00:00Z",
            "delayHours": 2,
            "delayReason": "Rainstorm and local roadblock",
            "weatherCondition": "Humid and foggy morning",
            "currentTempCelsius": 28,
            "currentHumidityPercent": 75,
            "estimatedSpoilagePercent": 6,
            "thresholds": {"minTemp": 20, "maxTemp": 28, "minHumidity": 40, "maxHumidity": 75},
        },
    },
    {
        "eventType": "RETAIL_RECEIPT",
        "actorId": "retailer_Enugu_003",
        "productId": "DOF-20250617-002",
        "location": "Enugu Market Stall 9",
        "details": {
            "receiptTime": "2025-06-18T09:00:00Z",
            "displayConditions": "Ambient",
            "currentTempCelsius": 30,
            "currentHumidityPercent": 58,
            "weatherCondition": "Afternoon heat with haze",
            "estimatedSpoilagePercent": 15,
            "thresholds": {"minTemp": 18, "maxTemp": 30, "minHumidity": 40, "maxHumidity": 60},
        },
    },
    {
        "eventType": "PAYMENT_REQUEST",
        "actorId": "farmer_002",
        "productId": "ONION_BATCH_002",
        "location": "Kaduna Farm Block B",
        "details": {
            "buyerId": "processor_NGR_003",
            "quantityKg": 300,
            "agreedPricePerKg": 400,
            "qualityVerified": True,
            "deliveryConfirmed": True,
            "spoilageRate": 0.06,
        },
    },
    # Plantain: cold chain holds, full payment
    {
        "eventType": "HARVEST",
        "actorId": "farmer_003",
        "productId": "PLANTAIN_BATCH_003",
        "location": "Ogun Green Belt",
        "details": {
            "cropType": "Plantain",
            "plantingDate": "2025-03-10",
            "harvestDate": "2025-07-01",
            "quantityKg": 400,
            "initialQuality": "Excellent",
        },
    },
    {
        "eventType": "TRANSPORT",
        "actorId": "logistics_NGR_005",
        "productId": "PLANTAIN_BATCH_003",
        "location": "En route to PH Cold Store",
        "details": {
            "vehicleId": "REF_TRUCK_987",
            "departureTime": "2025-07-01T07:00:00Z",
            "arrivalTime": "2025-07-02T09:00:00Z",
            "delayHours": 5,
            "delayReason": "Oil spill and roadblock on express route",
            "weatherCondition": "High humidity with light rain",
            "currentTempCelsius": 18,
            "currentHumidityPercent": 60,
            "estimatedSpoilagePercent": 8,
            "thresholds": {"minTemp": 16, "maxTemp": 22, "minHumidity": 55, "maxHumidity": 75},
        },
    },
    {
        "eventType": "WAREHOUSE_RECEIPT",
        "actorId": "warehouse_PH_001",
        "productId": "PLANTAIN_BATCH_003",
        "location": "Port Harcourt Cold Store",
        "details": {
            "receiptTime": "2025-07-02T10:30:00Z",
            "storageSection": "Cold Unit A",
            "currentTempCelsius": 19,
            "currentHumidityPercent": 62,
            "weatherCondition": "Cloudy and cool",
            "estimatedSpoilagePercent": 5,
            "thresholds": {"minTemp": 16, "maxTemp": 22, "minHumidity": 55, "maxHumidity": 75},
        },
    },
    {
        "eventType": "PROCESS",
        "actorId": "processor_NGR_004",
        "productId": "PLANTAIN_BATCH_003",
        "location": "PH Agro Plant",
        "details": {
            "processingDate": "2025-07-03",
            "processedInto": "Plantain Chips Pack 150g",
            "batchNo": "PCP-20250703-003",
            "qualityControl": "Passed",
            "quantityKg": 350,
        },
    },
    {
        "eventType": "TRANSPORT",
        "actorId": "logistics_NGR_006",
        "productId": "PLANTAIN_BATCH_003",
        "location": "En route to Port Harcourt Retail Hub",
        "details": {
            "vehicleId": "TRUCK_VLT_404",
            "departureTime": "2025-05-23T09:00:00Z",
            "arrivalTime": "2025-05-24T18:00:00Z",
            "delayHours": 3,
            "delayReason": "Checkpoint congestion and highway flooding",
            "weatherCondition": "Humid with intermittent rainfall",
            "currentTempCelsius": 28,
            "currentHumidityPercent": 75,
            "estimatedSpoilagePercent": 6,
            "thresholds": {"minTemp": 20, "maxTemp": 28, "minHumidity": 60, "maxHumidity": 75},
        },
    },
    {
        "eventType": "RETAIL_RECEIPT",
        "actorId": "retailer_PH_003",
        "productId": "PCP-20250703-003",
        "location": "Port Harcourt Retail Hub",
        "details": {
            "receiptTime": "2025-07-04T10:00:00Z",
            "displayConditions": "Shelf in AC room",
            "currentTempCelsius": 26,
            "currentHumidityPercent": 50,
            "weatherCondition": "Stable indoor environment",
            "estimatedSpoilagePercent": 3,
            "thresholds": {"minTemp": 20, "maxTemp": 30, "minHumidity": 40, "maxHumidity": 60},
        },
    },
    {
        "eventType": "PAYMENT_REQUEST",
        "actorId": "farmer_003",
        "productId": "PLANTAIN_BATCH_003",
        "location": "Ogun Green Belt",
        "details": {
            "buyerId": "processor_NGR_004",
            "quantityKg": 400,
            "agreedPricePerKg": 300,
            "qualityVerified": True,
            "deliveryConfirmed": True,
            "spoilageRate": 0.12,
        },
    },
    # Garlic: heat and humidity breaches, quality not verified
    {
        "eventType": "TRANSPORT",
        "actorId": "logistics_NGR_005",
        "productId": "GARLIC_BATCH_004",
        "location": "En route to Ibadan Storage",
        "details": {
            "vehicleId": "TRUCK_G321",
            "departureTime": "2025-06-30T13:00:00Z",
            "arrivalTime": "2025-07-01T12:30:00Z",
            "delayHours": 6,
            "delayReason": "Flooded road in Kwara",
            "weatherCondition": "Tropical downpour and heat afterward",
            "currentTempCelsius": 34,
            "currentHumidityPercent": 85,
            "estimatedSpoilagePercent": 20,
            "thresholds": {"minTemp": 16, "maxTemp": 28, "minHumidity": 40, "maxHumidity": 70},
        },
    },
    {
        "eventType": "WAREHOUSE_RECEIPT",
        "actorId": "warehouse_Ibadan_002",
        "productId": "GARLIC_BATCH_004",
        "location": "Ibadan Dry Store A",
        "details": {
            "receiptTime": "2025-07-01T14:00:00Z",
            "storageSection": "Non-cooled Bay 3",
            "currentTempCelsius": 30,
            "currentHumidityPercent": 75,
            "weatherCondition": "Sunny and humid",
            "estimatedSpoilagePercent": 18,
            "thresholds": {"minTemp": 18, "maxTemp": 28, "minHumidity": 40, "maxHumidity": 70},
        },
    },
    {
        "eventType": "RETAIL_RECEIPT",
        "actorId": "retailer_Ibadan_002",
        "productId": "GARLIC_BATCH_004",
        "location": "Ibadan Market Row 5",
        "details": {
            "receiptTime": "2025-07-02T09:00:00Z",
            "displayConditions": "Open-air Stall",
            "currentTempCelsius": 32,
            "currentHumidityPercent": 80,
            "weatherCondition": "Scorching afternoon sun",
            "estimatedSpoilagePercent": 22,
            "thresholds": {"minTemp": 20, "maxTemp": 30, "minHumidity": 45, "maxHumidity": 70},
        },
    },
    {
        "eventType": "PAYMENT_REQUEST",
        "actorId": "farmer_004",
        "productId": "GARLIC_BATCH_004",
        "location": "Plateau Highland Farm",
        "details": {
            "buyerId": "retailer_Ibadan_002",
            "quantityKg": 250,
            "agreedPricePerKg": 280,
            "qualityVerified": False,
            "deliveryConfirmed": True,
            "spoilageRate": 0.05,
        },
    },
    # Frozen tilapia: freezer malfunction at retail
    {
        "eventType": "HARVEST",
        "actorId": "fish_farm_001",
        "productId": "FROZEN_TILAPIA_005",
        "location": "Badagry Aquaculture Farm",
        "details": {
            "fishType": "Tilapia",
            "harvestDate": "2025-06-25",
            "quantityKg": 600,
            "storageMethod": "Ice-slurry Pre-freeze",
            "initialQuality": "Excellent",
        },
    },
    {
        "eventType": "PROCESS",
        "actorId": "cold_processor_001",
        "productId": "FROZEN_TILAPIA_005",
        "location": "Lagos Cold Processing Unit",
        "details": {
            "processingDate": "2025-06-26",
            "processedInto": "Packaged Fish Bag 1kg",
            "batchNo": "PFB-20250626-005",
            "qualityControl": "Passed",
            "quantityKg": 580,
        },
    },
    {
        "eventType": "TRANSPORT",
        "actorId": "cold_logistics_NGR_009",
        "productId": "FROZEN_TILAPIA_005",
        "location": "Lagos to Jos Route (Frozen Chain)",
        "details": {
            "vehicleId": "FREEZER_TRUCK_909",
            "departureTime": "2025-06-26T18:00:00Z",
            "arrivalTime": "2025-06-27T23:00:00Z",
            "delayHours": 3,
            "delayReason": "Freezer truck engine repair at Abuja bypass",
            "weatherCondition": "Dry northern crosswinds",
            "currentTempCelsius": -16,
            "currentHumidityPercent": 40,
            "estimatedSpoilagePercent": 12,
            "thresholds": {"minTemp": -20, "maxTemp": -10, "minHumidity": 30, "maxHumidity": 50},
        },
    },
    {
        "eventType": "RETAIL_RECEIPT",
        "actorId": "retailer_Jos_004",
        "productId": "FROZEN_TILAPIA_005",
        "location": "Jos Cold Market Unit 4",
        "details": {
            "receiptTime": "2025-06-28T08:00:00Z",
            "displayConditions": "Frozen Display Cabinet",
            "currentTempCelsius": -8,
            "currentHumidityPercent": 48,
            "weatherCondition": "Freezer door malfunction reported overnight",
            "estimatedSpoilagePercent": 15,
            "thresholds": {"minTemp": -20, "maxTemp": -10, "minHumidity": 30, "maxHumidity": 50},
        },
    },
    {
        "eventType": "PAYMENT_REQUEST",
        "actorId": "fish_farm_001",
        "productId": "FROZEN_TILAPIA_005",
        "location": "Badagry Aquaculture Farm",
        "details": {
            "buyerId": "retailer_Jos_004",
            "quantityKg": 600,
            "agreedPricePerKg": 950,
            "qualityVerified": True,
            "deliveryConfirmed": True,
            "spoilageRate": 0.25,
        },
    },
]
