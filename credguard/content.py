"""
Static marketing content served to the landing page
"""

NAVIGATION = [
    {'href': '#features', 'label': 'Features'},
    {'href': '#demo', 'label': 'Demo'},
    {'href': '#how-it-works', 'label': 'How It Works'},
    {'href': '#security', 'label': 'Security'},
]

FOOTER_LINKS = {
    'product': [
        {'label': 'Features', 'href': '#features'},
        {'label': 'How It Works', 'href': '#how-it-works'},
        {'label': 'Security', 'href': '#security'},
        {'label': 'Pricing', 'href': '#'},
    ],
    'company': [
        {'label': 'About', 'href': '#'},
        {'label': 'Careers', 'href': '#'},
        {'label': 'Press', 'href': '#'},
        {'label': 'Contact', 'href': '#'},
    ],
    'resources': [
        {'label': 'Documentation', 'href': '#'},
        {'label': 'API Reference', 'href': '#'},
        {'label': 'Blog', 'href': '#'},
        {'label': 'Support', 'href': '#'},
    ],
    'legal': [
        {'label': 'Privacy Policy', 'href': '#'},
        {'label': 'Terms of Service', 'href': '#'},
        {'label': 'Cookie Policy', 'href': '#'},
        {'label': 'Compliance', 'href': '#compliance'},
    ],
}

HERO = {
    'badge': 'Privacy-First Credit Infrastructure',
    'headline': 'Your Credit Identity.',
    'headline_accent': 'Global. Secure. Private.',
    'subheadline': ('Access fair credit worldwide without exposing your personal data. '
                    'Built on encrypted vector search technology for instant, private verification.'),
    'primary_cta': 'Get Started',
    'secondary_cta': 'See How It Works',
    'trust_indicators': ['GDPR Compliant', 'Zero-Knowledge Proofs', 'Bank-Grade Security'],
}

STATS = [
    {'value': '180+', 'label': 'Countries Supported', 'description': 'Global coverage'},
    {'value': '50M+', 'label': 'Credit Profiles', 'description': 'Encrypted identities'},
    {'value': '2,500+', 'label': 'Partner Institutions', 'description': 'Banks worldwide'},
    {'value': '0', 'label': 'Data Breaches', 'description': 'Privacy by design'},
]

FEATURES = [
    {'title': 'Encrypted Behavioral Identity',
     'description': 'Convert your financial behavior into a mathematically irreversible encrypted vector.'},
    {'title': 'Global Trust Fabric',
     'description': 'Worldwide index enabling instant similarity matching and sub-second verification.'},
    {'title': 'Privacy-Preserving Inference',
     'description': 'Banks query encrypted identities using homomorphic encryption.'},
    {'title': 'AI Fairness Layer',
     'description': 'Detects and removes bias related to migration status, nationality, or geography.'},
    {'title': 'Zero-Knowledge Explainability',
     'description': 'Regulators verify decisions with cryptographic proofs, without accessing data.'},
    {'title': 'Self-Sovereign Credit Wallet',
     'description': 'Store your encrypted credit identity on your device. Full consent control.'},
]

HOW_IT_WORKS = [
    {'number': '01', 'title': 'Connect Your Data',
     'description': ('Securely link your financial accounts. Your raw data never leaves your device; '
                     'only encrypted behavioral patterns are generated.'),
     'highlight': '100% Local Processing'},
    {'number': '02', 'title': 'Generate Encrypted Identity',
     'description': ('AI transforms your financial behavior into a mathematically irreversible '
                     'encrypted vector using zero-knowledge proofs.'),
     'highlight': 'ZK-Proof Protected'},
    {'number': '03', 'title': 'Global Trust Matching',
     'description': ('Your encrypted identity is matched against our global trust fabric for '
                     'instant creditworthiness verification.'),
     'highlight': 'Sub-Second Results'},
    {'number': '04', 'title': 'Receive Fair Credit',
     'description': ('Lenders receive a verified trust score without ever accessing your personal '
                     'financial data. Fair credit, anywhere.'),
     'highlight': 'Privacy Preserved'},
]

DEMO_STEPS = [
    {'id': 1, 'title': 'Data Collection',
     'description': 'Your financial behavior is analyzed locally on your device',
     'details': ['Repayment patterns', 'Spending stability', 'Income regularity', 'Employment history']},
    {'id': 2, 'title': 'Behavioral Encoding',
     'description': 'AI transforms patterns into encrypted behavioral vectors',
     'details': ['ML embeddings generated', 'Pattern compression', 'Feature extraction', 'Vector normalization']},
    {'id': 3, 'title': 'Zero-Knowledge Encryption',
     'description': 'Vectors are encrypted using ZK proofs, an irreversible transformation',
     'details': ['Homomorphic encryption', 'ZK-SNARK proofs', 'Privacy preservation', 'Mathematical verification']},
    {'id': 4, 'title': 'CyborgDB Indexing',
     'description': 'Encrypted identity is indexed in the global trust fabric',
     'details': ['Encrypted vector search', 'Global similarity matching', 'Sub-second queries',
                 'Cross-border compatibility']},
    {'id': 5, 'title': 'Verification Ready',
     'description': 'Your encrypted identity can now be verified by institutions',
     'details': ['Instant verification', 'Privacy preserved', 'Global accessibility', 'User-controlled consent']},
]

DEMO_MOCK_DATA = {
    'raw_data': {
        'transactions': 1247,
        'avgBalance': '$4,892',
        'repaymentRate': '98.7%',
        'incomeStability': 'High',
    },
    'encrypted_vector': '0x7f3a8b2c4d9e1f6a8c2d4e91b6f02a739d851c4ef0283b7d9e2f1a6c8b4d0e3f',
    'zk_proof': 'π = (A, B, C) ∈ G₁ × G₂ × G₁',
}

SECURITY_FEATURES = [
    {'id': 'encryption', 'title': 'Homomorphic Encryption',
     'description': "Computations run on encrypted data. Even we can't see your information.",
     'details': ['Data remains encrypted during processing', 'No decryption keys stored on servers',
                 'Mathematical guarantees of privacy']},
    {'id': 'zkp', 'title': 'Zero-Knowledge Proofs',
     'description': 'Prove creditworthiness without revealing any underlying data.',
     'details': ['Verify claims without exposing details', 'Cryptographic proof of attributes',
                 'Privacy-preserving attestations']},
    {'id': 'mpc', 'title': 'Secure Multi-Party Computation',
     'description': 'Distributed processing ensures no single point of data exposure.',
     'details': ['Computation split across nodes', 'No single party sees full data', 'Byzantine fault tolerant']},
    {'id': 'keys', 'title': 'User-Controlled Keys',
     'description': 'Only you hold the keys to your encrypted identity.',
     'details': ['Self-sovereign key management', 'Hardware security module support', 'Recovery without exposure']},
]

COMPLIANCE = {
    'regulations': [
        {'name': 'GDPR', 'region': 'European Union'},
        {'name': 'CCPA', 'region': 'California, USA'},
        {'name': 'PDPA', 'region': 'Southeast Asia'},
        {'name': 'EU AI Act', 'region': 'European Union'},
        {'name': 'RBI Guidelines', 'region': 'India'},
        {'name': 'PCI DSS', 'region': 'Global'},
    ],
    'pillars': [
        {'title': 'Algorithmic Fairness',
         'description': 'Continuous monitoring and auditing for bias in credit decisions.'},
        {'title': 'Regulatory Reporting',
         'description': 'Automated compliance reports for regulators across jurisdictions.'},
        {'title': 'Cross-Border Compatibility',
         'description': 'Designed to work within varying international privacy frameworks.'},
        {'title': 'Audit Trails',
         'description': 'Cryptographic proofs of every decision for accountability.'},
    ],
}

CTA = {
    'headline': 'Ready to Build Global Credit Trust?',
    'body': ('Join thousands of financial institutions already using CREDGUARD '
             'to provide fair, privacy-preserving credit verification worldwide.'),
    'primary_cta': 'Get Started',
    'secondary_cta': 'Contact Sales',
}

SECTIONS = {
    'navigation': NAVIGATION,
    'footer': FOOTER_LINKS,
    'hero': HERO,
    'stats': STATS,
    'features': FEATURES,
    'how_it_works': HOW_IT_WORKS,
    'demo': {'steps': DEMO_STEPS, 'mock_data': DEMO_MOCK_DATA},
    'security': SECURITY_FEATURES,
    'compliance': COMPLIANCE,
    'cta': CTA,
}
